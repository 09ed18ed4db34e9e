"""
Keg Tracker Store

In-memory collection of beer kegs keyed by a sequential ID.
Supports adding kegs, updating their current volume, and listing the inventory.
"""
import threading
import time
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel


class Keg(BaseModel):
    """A single beer keg and its current state."""
    id: int
    beer_type: str
    size: float
    current_volume: float
    location: str
    last_updated: int  # Unix timestamp, seconds


class KegTrackerError(Exception):
    """Base class for keg tracker errors."""


class KegNotFoundError(KegTrackerError, KeyError):
    """No keg is registered under the requested ID."""

    def __init__(self, keg_id: int):
        super().__init__(keg_id)
        self.keg_id = keg_id

    def __str__(self) -> str:
        return "Keg not found"


class ExceedsCapacityError(KegTrackerError, ValueError):
    """The requested volume is larger than the keg size."""

    def __init__(self, keg_id: int, volume: float, size: float):
        super().__init__(keg_id, volume, size)
        self.keg_id = keg_id
        self.volume = volume
        self.size = size

    def __str__(self) -> str:
        return "Volume cannot exceed keg size"


class KegTracker:
    """
    Manages a collection of kegs.

    IDs start at 1 and are handed out sequentially; they are never reused.
    Size and location are stored as given, and only the upper bound of the
    current volume is checked.

    All operations hold an instance lock, so a tracker shared between threads
    never exposes a half-applied update.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._kegs: Dict[int, Keg] = {}
        self._next_id = 1
        self._clock = clock or time.time
        self._lock = threading.Lock()

    def _now(self) -> int:
        return int(self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._kegs)

    def __contains__(self, keg_id: object) -> bool:
        with self._lock:
            return keg_id in self._kegs

    @property
    def next_id(self) -> int:
        """ID the next added keg will receive."""
        return self._next_id

    def add_keg(self, beer_type: str, size: float, location: str) -> int:
        """
        Add a new keg to the tracker.

        The keg starts full (current volume equal to size) and is stamped
        with the current time.

        Args:
            beer_type: Type of beer in the keg
            size: Total capacity of the keg
            location: Physical location of the keg

        Returns:
            The ID assigned to the new keg
        """
        with self._lock:
            keg_id = self._next_id
            self._kegs[keg_id] = Keg(
                id=keg_id,
                beer_type=beer_type,
                size=size,
                current_volume=size,
                location=location,
                last_updated=self._now(),
            )
            self._next_id += 1
            return keg_id

    def update_keg(self, keg_id: int, volume: float) -> Keg:
        """
        Set the current volume of a keg.

        Args:
            keg_id: ID of the keg to update
            volume: New volume; may be negative but not larger than the keg size

        Returns:
            The updated keg

        Raises:
            KegNotFoundError: No keg has this ID
            ExceedsCapacityError: The volume is larger than the keg size
        """
        with self._lock:
            keg = self._kegs.get(keg_id)
            if keg is None:
                raise KegNotFoundError(keg_id)
            if volume > keg.size:
                raise ExceedsCapacityError(keg_id, volume, keg.size)

            keg.current_volume = volume
            keg.last_updated = self._now()
            return keg.model_copy()

    def get_keg(self, keg_id: int) -> Keg:
        """Return a copy of the keg with the given ID."""
        with self._lock:
            keg = self._kegs.get(keg_id)
            if keg is None:
                raise KegNotFoundError(keg_id)
            return keg.model_copy()

    def list_kegs(self) -> List[Keg]:
        """Return a snapshot of all kegs. Order is not guaranteed."""
        with self._lock:
            return [keg.model_copy() for keg in self._kegs.values()]
