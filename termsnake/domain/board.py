"""
Board geometry and the collision predicate shared by movement and food placement.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .constants import BORDER_WIDTH, STATUS_HEIGHT, MIN_TERMINAL_COLUMNS, MIN_TERMINAL_ROWS


class TerminalTooSmallError(ValueError):
    """Raised when the terminal cannot hold a playable board."""


@dataclass(frozen=True)
class Board:
    """
    The playable area, excluding the border and the status box.

    Attributes:
        width: number of columns, x in [0, width)
        height: number of rows, y in [0, height)
    """

    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}.")

    @classmethod
    def from_terminal(cls, rows: int, columns: int) -> "Board":
        """
        Derive the board from the terminal size reported by curses.

        One border row sits above the play field and a three-row status box
        below it, one border column on each side.
        """
        if columns < MIN_TERMINAL_COLUMNS or rows < MIN_TERMINAL_ROWS:
            raise TerminalTooSmallError(
                f"Terminal window too small ({columns}x{rows}), "
                f"need at least {MIN_TERMINAL_COLUMNS}x{MIN_TERMINAL_ROWS}."
            )
        return cls(width=columns - BORDER_WIDTH, height=rows - STATUS_HEIGHT)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[int, int]:
        return (self.width // 2, self.height // 2)

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, cell: Tuple[int, int], occupied: Iterable[Tuple[int, int]]) -> bool:
        """True if the cell is off the board or already taken by a snake segment."""
        if not self.in_bounds(cell):
            return True
        return cell in occupied
