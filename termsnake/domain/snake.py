"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional, Set


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'board_full'
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments overlap: {positions}")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def next_head(self, direction) -> Tuple[int, int]:
        hx, hy = self.head
        return (hx + direction.dx, hy + direction.dy)

    def occupied_after_move(self, grow: bool) -> Set[Tuple[int, int]]:
        """
        Cells the body still covers once the head has moved.

        The tail is vacated in the same tick unless the snake grows.
        """
        cells = set(self.positions)
        if not grow:
            cells.discard(self.tail)
        return cells

    def advance(self, new_head: Tuple[int, int], grow: bool = False):
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, alive={self.alive}>"
