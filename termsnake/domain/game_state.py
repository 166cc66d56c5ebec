"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board
from .constants import Direction, GamePhase, LEVEL_SIZE


@dataclass(frozen=True)
class GameState:
    """
    A read-only snapshot handed to the renderer once per tick.

    Attributes:
        board: playable area
        snake_positions: tuple of (x, y), head first
        food: (x, y) of the food, None only once the board is full
        score: points in the current game
        high_score: best score seen so far, including this game
        phase: Running, Paused or Over
        direction: current heading
        speed_level: 1-based difficulty tier
        level_progress: points towards the next level, in [0, level_size)
        level_size: points per level
        delay_ms: current tick delay
        death_reason: why the game ended, if it has
    """

    board: Board
    snake_positions: Tuple[Tuple[int, int], ...]
    food: Optional[Tuple[int, int]]
    score: int
    high_score: int
    phase: GamePhase
    direction: Direction
    speed_level: int
    level_progress: int
    delay_ms: int
    level_size: int = LEVEL_SIZE
    death_reason: Optional[str] = None

    @property
    def paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        O = food
        @ = snake head
        # = snake body
        (0,0) is the top left cell, matching the terminal.
        """
        board = [['.' for _ in range(self.board.width)] for _ in range(self.board.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'O'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not self.board.in_bounds((x, y)):
                continue
            board[y][x] = '@' if pos_idx == 0 else '#'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, score={self.score}, "
            f"high_score={self.high_score}, length={len(self.snake_positions)}, food={self.food}>"
        )
