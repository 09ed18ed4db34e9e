"""
Interactive text menu for the keg tracker.

Collects values from the operator, calls the tracker and prints the results.
Numeric input that cannot be parsed falls back to zero here, so the tracker
only ever sees real numbers.
"""
import sys
from typing import Callable, Iterable, List, Optional, TextIO

from .tracker import Keg, KegTracker, KegTrackerError

MENU = """
Keg Tracker Menu:
1. Add new keg
2. Update keg volume
3. List all kegs
4. Exit"""

TABLE_HEADER = "ID\tBeer Type\tSize\tCurrent\tLocation"
TABLE_RULE = "-" * 40


def parse_float(text: str, default: float = 0.0) -> float:
    """Parse a float, returning the default for unparsable input."""
    text = text.strip()
    # digit separators are not accepted
    if "_" in text:
        return default
    try:
        return float(text)
    except ValueError:
        return default


def parse_int(text: str, default: int = 0) -> int:
    """Parse an integer, returning the default for unparsable input."""
    text = text.strip()
    if "_" in text:
        return default
    try:
        return int(text)
    except ValueError:
        return default


def format_keg_row(keg: Keg) -> str:
    return (
        f"{keg.id}\t{keg.beer_type}\t{keg.size:.1f}\t"
        f"{keg.current_volume:.1f}\t{keg.location}"
    )


def render_table(kegs: Iterable[Keg]) -> List[str]:
    """
    Render kegs as table lines.

    Returns a single "no kegs" line for an empty inventory instead of an
    empty table.
    """
    rows = [format_keg_row(keg) for keg in kegs]
    if not rows:
        return ["No kegs in the system."]
    return ["", "Current Kegs:", TABLE_HEADER, TABLE_RULE] + rows


class KegShell:
    """Menu loop driving a KegTracker."""

    def __init__(
        self,
        tracker: KegTracker,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
        unit: str = "gallons",
    ):
        self.tracker = tracker
        self.input_func = input_func or input
        self.output = output or sys.stdout
        self.unit = unit

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def _prompt(self, text: str) -> str:
        self.output.write(text)
        self.output.flush()
        return self.input_func().strip()

    def add_keg(self) -> None:
        beer_type = self._prompt("Enter beer type: ")
        size = parse_float(self._prompt(f"Enter keg size ({self.unit}): "))
        location = self._prompt("Enter location: ")

        self.tracker.add_keg(beer_type, size, location)
        self._print("Keg added successfully!")

    def update_keg(self) -> None:
        keg_id = parse_int(self._prompt("Enter keg ID: "))
        volume = parse_float(self._prompt(f"Enter new volume ({self.unit}): "))

        try:
            self.tracker.update_keg(keg_id, volume)
        except KegTrackerError as e:
            self._print(f"Error: {e}")
        else:
            self._print("Keg updated successfully!")

    def list_kegs(self) -> None:
        for line in render_table(self.tracker.list_kegs()):
            self._print(line)

    def handle_choice(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the operator asked to exit."""
        if choice == "1":
            self.add_keg()
        elif choice == "2":
            self.update_keg()
        elif choice == "3":
            self.list_kegs()
        elif choice == "4":
            return False
        else:
            self._print("Invalid choice. Please try again.")
        return True

    def run(self) -> int:
        """Show the menu until the operator exits or input ends."""
        try:
            while True:
                self._print(MENU)
                choice = self._prompt("Enter your choice: ")
                if not self.handle_choice(choice):
                    break
        except (EOFError, KeyboardInterrupt):
            self._print()
        self._print("Exiting...")
        return 0
