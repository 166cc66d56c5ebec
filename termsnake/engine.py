"""
Single-player snake game engine.

SnakeGame owns every piece of mutable game state (snake, food, score, phase,
tick delay) and advances it one tick at a time. Input arrives as Command
values, output leaves as immutable GameState snapshots.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from termsnake.domain import (
    Board,
    Snake,
    GameState,
    Direction,
    GamePhase,
    Command,
    DEFAULT_DIRECTION,
    place_food,
    BoardFullError,
    compute_delay,
    speed_level,
    level_progress,
)
from termsnake.domain.constants import (
    COMMAND_DIRECTIONS,
    DEATH_WALL,
    DEATH_SELF,
    DEATH_BOARD_FULL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one simulation step."""

    moved: bool
    ate_food: bool = False
    fatal: bool = False
    death_reason: Optional[str] = None


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its direction
      - Food
      - Score and high score
      - Phase (running / paused / over)
      - Tick delay
    """

    def __init__(
        self,
        board: Board,
        high_scores=None,
        rng: Optional[random.Random] = None,
        board_provider: Optional[Callable[[], Board]] = None,
    ):
        """
        Args:
            board: playable area
            high_scores: object with load_high_score() and save_high_score(score);
                         None keeps the high score in memory only
            rng: random source for food placement
            board_provider: called on restart to re-measure the board, e.g. after
                            the terminal was resized
        """
        self.board = board
        self.high_scores = high_scores
        self.rng = rng or random.Random()
        self.board_provider = board_provider
        self.high_score = high_scores.load_high_score() if high_scores is not None else 0
        self.quitting = False
        self.reset()

    def reset(self):
        """Start a fresh game: one-cell snake at the centre, score 0, initial speed."""
        self.snake = Snake([self.board.center])
        self.direction = DEFAULT_DIRECTION
        self._last_moved = DEFAULT_DIRECTION
        self.score = 0
        self.delay_ms = compute_delay(0)
        self.phase = GamePhase.RUNNING
        self.food: Optional[Tuple[int, int]] = place_food(self.board, self.snake.positions, self.rng)

    @property
    def should_exit(self) -> bool:
        return self.quitting and self.phase is GamePhase.OVER

    def set_food(self, cell: Tuple[int, int]):
        """Place the food on a specific cell."""
        if self.board.is_blocked(cell, self.snake.positions):
            raise ValueError(f"Food cannot be placed at {cell}.")
        self.food = cell

    def change_direction(self, direction: Direction) -> bool:
        """
        Turn the snake. Only turns onto the other axis are accepted, judged
        against the last executed move so queued turns cannot reverse it.
        """
        if direction.is_horizontal == self._last_moved.is_horizontal:
            return False
        self.direction = direction
        return True

    def toggle_pause(self):
        if self.phase is GamePhase.RUNNING:
            self.phase = GamePhase.PAUSED
        elif self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.RUNNING

    def handle_command(self, command: Optional[Command]):
        """Apply one input event according to the current phase."""
        if command is None:
            return

        if command is Command.QUIT:
            self.quitting = True
            if self.phase is not GamePhase.OVER:
                self._end_game(reason=None)
            else:
                self.record_high_score()
            return

        if self.phase is GamePhase.OVER:
            if command is Command.RESTART:
                self.restart()
            return

        if command is Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif command in COMMAND_DIRECTIONS:
            self.change_direction(COMMAND_DIRECTIONS[command])

    def restart(self):
        self.record_high_score()
        if self.board_provider is not None:
            self.board = self.board_provider()
        self.reset()
        logger.info("Game restarted (high score %d)", self.high_score)

    def step(self) -> StepResult:
        """
        Advance the simulation by one move:
          1) Compute the candidate head
          2) Die on a wall or on the body (the tail moves away unless growing)
          3) Grow on food, otherwise slide forward
        """
        candidate = self.snake.next_head(self.direction)
        grows = candidate == self.food

        if not self.board.in_bounds(candidate):
            return StepResult(moved=False, fatal=True, death_reason=DEATH_WALL)
        if self.board.is_blocked(candidate, self.snake.occupied_after_move(grows)):
            return StepResult(moved=False, fatal=True, death_reason=DEATH_SELF)

        self.snake.advance(candidate, grow=grows)
        self._last_moved = self.direction
        return StepResult(moved=True, ate_food=grows)

    def tick(self, command: Optional[Command] = None) -> GameState:
        """One loop iteration: apply input, advance if running, return a snapshot."""
        self.handle_command(command)

        if self.phase is GamePhase.RUNNING:
            result = self.step()
            if result.fatal:
                self._end_game(result.death_reason)
            elif result.ate_food:
                self._eat_food()

        return self.get_current_state()

    def _eat_food(self):
        self.score += 1
        previous_level = speed_level(self.score - 1)
        self.delay_ms = compute_delay(self.score)
        if speed_level(self.score) != previous_level:
            logger.info("Reached speed level %d (%d ms per tick)", speed_level(self.score), self.delay_ms)

        if self.score > self.high_score:
            self.record_high_score()

        try:
            self.food = place_food(self.board, self.snake.positions, self.rng)
        except BoardFullError:
            self.food = None
            self._end_game(DEATH_BOARD_FULL)

    def _end_game(self, reason: Optional[str]):
        self.phase = GamePhase.OVER
        self.snake.alive = reason is None
        self.snake.death_reason = reason
        self.record_high_score()
        if reason is None:
            logger.info("Game quit with score %d", self.score)
        else:
            logger.info("Game Over: %s (score %d, high score %d)", reason, self.score, self.high_score)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n%s", self.get_current_state().print_board())

    def record_high_score(self):
        """Raise the in-memory high score and persist it if the game beat it."""
        if self.score <= self.high_score:
            return
        self.high_score = self.score
        if self.high_scores is not None:
            self.high_scores.save_high_score(self.score)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            board=self.board,
            snake_positions=tuple(self.snake.positions),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
            direction=self.direction,
            speed_level=speed_level(self.score),
            level_progress=level_progress(self.score),
            delay_ms=self.delay_ms,
            death_reason=self.snake.death_reason,
        )
