"""
Food placement.
"""

import random
from typing import Collection, Optional, Tuple

from .board import Board


class BoardFullError(RuntimeError):
    """Raised when the snake covers every cell and no food can be placed."""


def place_food(
    board: Board,
    occupied: Collection[Tuple[int, int]],
    rng: Optional[random.Random] = None,
) -> Tuple[int, int]:
    """
    Return a random in-bounds cell not occupied by the snake.

    Candidates are sampled uniformly and rejected until one is free, so the
    distribution over free cells stays uniform.
    """
    rng = rng or random
    if len(set(occupied)) >= board.area:
        raise BoardFullError(f"No free cell left on a {board.width}x{board.height} board.")

    while True:
        x = rng.randint(0, board.width - 1)
        y = rng.randint(0, board.height - 1)
        if not board.is_blocked((x, y), occupied):
            return (x, y)
