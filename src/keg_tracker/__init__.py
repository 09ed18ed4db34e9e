"""
Keg Tracker - A command-line tracker for beer kegs and their contents

Features:
- Register new kegs (they start full)
- Update the current volume of a keg, never above its size
- List the whole inventory as a table
- Interactive text menu for the operator
"""

__version__ = "0.1.0"

from .tracker import (
    Keg,
    KegTracker,
    KegTrackerError,
    KegNotFoundError,
    ExceedsCapacityError,
)

__all__ = [
    "Keg",
    "KegTracker",
    "KegTrackerError",
    "KegNotFoundError",
    "ExceedsCapacityError",
]
