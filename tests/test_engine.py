"""
Tests for engine.py - the single-player game state machine.
"""

import logging
import random
from unittest.mock import Mock

import pytest

from termsnake.domain import Board, Snake, Direction, GamePhase, Command
from termsnake.engine import SnakeGame, StepResult


def make_game(width=10, height=10, stored_high_score=None, seed=1234):
    high_scores = None
    if stored_high_score is not None:
        high_scores = Mock()
        high_scores.load_high_score = Mock(return_value=stored_high_score)
        high_scores.save_high_score = Mock(return_value=True)
    return SnakeGame(Board(width, height), high_scores=high_scores, rng=random.Random(seed))


class TestSnakeGameInitialization:
    """Tests for a freshly created game."""

    def test_game_initialization(self):
        """A new game starts running with a one-cell snake at the centre."""
        game = make_game()

        assert list(game.snake.positions) == [(5, 5)]
        assert game.direction is Direction.RIGHT
        assert game.score == 0
        assert game.delay_ms == 70
        assert game.phase is GamePhase.RUNNING
        assert game.food is not None
        assert game.food not in game.snake

    def test_high_score_loaded_from_store(self):
        """The stored high score is read once at start."""
        game = make_game(stored_high_score=17)
        assert game.high_score == 17
        game.high_scores.load_high_score.assert_called_once()

    def test_set_food_on_snake_raises(self):
        """set_food() rejects cells covered by the snake."""
        game = make_game()
        with pytest.raises(ValueError):
            game.set_food((5, 5))

    def test_set_food_out_of_bounds_raises(self):
        """set_food() rejects cells off the board."""
        game = make_game()
        with pytest.raises(ValueError):
            game.set_food((15, 15))


class TestDirectionChanges:
    """Tests for the axis-locked direction rule."""

    def test_reverse_is_rejected(self):
        """Moving right, a Left input is ignored."""
        game = make_game()
        game.handle_command(Command.LEFT)
        assert game.direction is Direction.RIGHT

    def test_same_direction_is_rejected(self):
        """A turn onto the current axis is not a turn."""
        game = make_game()
        assert game.change_direction(Direction.RIGHT) is False

    @pytest.mark.parametrize("command,direction", [
        (Command.UP, Direction.UP),
        (Command.DOWN, Direction.DOWN),
    ])
    def test_perpendicular_turn_is_accepted(self, command, direction):
        """Moving right, Up and Down are accepted."""
        game = make_game()
        game.handle_command(command)
        assert game.direction is direction

    def test_queued_turns_while_paused_cannot_reverse(self):
        """Two turns without a move in between cannot reverse the snake."""
        game = make_game()
        game.handle_command(Command.TOGGLE_PAUSE)

        game.handle_command(Command.UP)
        game.handle_command(Command.LEFT)

        assert game.direction is Direction.UP

    def test_turn_takes_effect_on_next_tick(self):
        """After turning up, the head moves up."""
        game = make_game()
        game.set_food((0, 0))
        game.tick(Command.UP)
        assert game.snake.head == (5, 4)


class TestStep:
    """Tests for movement, growth and collisions."""

    def test_eating_food_grows_and_scores(self):
        """Head reaching the food grows the snake by one and scores a point."""
        game = make_game()
        game.set_food((6, 5))

        state = game.tick()

        assert list(game.snake.positions) == [(6, 5), (5, 5)]
        assert state.score == 1
        assert state.food is not None
        assert state.food not in state.snake_positions

    def test_plain_move_keeps_length(self):
        """Without food the snake slides forward."""
        game = make_game()
        game.set_food((0, 0))

        result = game.step()

        assert result == StepResult(moved=True, ate_food=False)
        assert list(game.snake.positions) == [(6, 5)]

    def test_wall_collision_is_fatal(self):
        """Moving off the board ends the game and leaves the snake in place."""
        game = make_game()
        game.snake = Snake([(0, 5)])
        game.direction = Direction.LEFT
        game.set_food((9, 9))

        state = game.tick()

        assert state.phase is GamePhase.OVER
        assert state.death_reason == "wall"
        assert list(game.snake.positions) == [(0, 5)]
        assert game.snake.alive is False

    def test_self_collision_is_fatal(self):
        """Running into the body ends the game."""
        game = make_game()
        game.snake = Snake([(5, 5), (5, 6), (4, 6), (4, 5), (4, 4)])
        game.direction = Direction.LEFT
        game.set_food((9, 9))

        result = game.step()

        assert result.fatal is True
        assert result.death_reason == "self"
        assert len(game.snake) == 5

    def test_head_may_enter_vacated_tail_cell(self):
        """The tail moves away in the same tick, so the head may take its cell."""
        game = make_game()
        game.snake = Snake([(5, 5), (5, 6), (4, 6), (4, 5)])
        game.direction = Direction.LEFT
        game.set_food((9, 9))

        result = game.step()

        assert result.moved is True
        assert list(game.snake.positions) == [(4, 5), (5, 5), (5, 6), (4, 6)]

    def test_tail_cell_is_occupied_on_growth_tick(self):
        """When the snake grows its tail stays, so entering it is fatal."""
        game = make_game()
        game.snake = Snake([(5, 5), (5, 6), (4, 6), (4, 5)])
        game.direction = Direction.LEFT
        game.food = (4, 5)

        result = game.step()

        assert result.fatal is True
        assert result.death_reason == "self"

    def test_board_full_ends_game(self):
        """Filling the last free cell ends the game without placing food."""
        game = make_game(width=2, height=1)
        assert game.food == (0, 0)
        game.direction = Direction.LEFT

        state = game.tick()

        assert state.score == 1
        assert state.phase is GamePhase.OVER
        assert state.death_reason == "board_full"
        assert state.food is None


class TestPhases:
    """Tests for Running / Paused / Over transitions."""

    def test_toggle_pause_twice_restores_state(self):
        """Pausing and unpausing changes nothing else."""
        game = make_game()
        before = game.get_current_state()

        game.handle_command(Command.TOGGLE_PAUSE)
        assert game.phase is GamePhase.PAUSED
        game.handle_command(Command.TOGGLE_PAUSE)

        assert game.get_current_state() == before

    def test_paused_tick_does_not_move(self):
        """A paused game does not advance."""
        game = make_game()
        game.handle_command(Command.TOGGLE_PAUSE)

        state = game.tick()

        assert state.phase is GamePhase.PAUSED
        assert state.snake_positions == ((5, 5),)

    def test_quit_while_running_forces_game_over(self):
        """Quit moves to Over first and then asks the loop to exit."""
        game = make_game()

        state = game.tick(Command.QUIT)

        assert state.phase is GamePhase.OVER
        assert game.should_exit is True
        assert state.snake_positions == ((5, 5),)

    def test_quit_while_paused_forces_game_over(self):
        """Quit from Paused also lands in Over."""
        game = make_game()
        game.handle_command(Command.TOGGLE_PAUSE)
        game.handle_command(Command.QUIT)
        assert game.phase is GamePhase.OVER
        assert game.should_exit is True

    def test_game_over_ignores_pause_and_directions(self):
        """Only restart and quit act on a finished game."""
        game = make_game()
        game.snake = Snake([(9, 5)])
        game.set_food((0, 0))
        game.tick()
        assert game.phase is GamePhase.OVER

        game.handle_command(Command.TOGGLE_PAUSE)
        game.handle_command(Command.UP)

        assert game.phase is GamePhase.OVER
        assert game.direction is Direction.RIGHT
        assert game.should_exit is False

    def test_restart_after_game_over_resets(self):
        """Restart resets score, snake, direction, delay and phase."""
        game = make_game()
        game.score = 12
        game.delay_ms = 65
        game.snake = Snake([(5, 0), (5, 1)])
        game.direction = Direction.UP
        game.set_food((0, 9))
        game.tick()
        assert game.phase is GamePhase.OVER

        game.handle_command(Command.RESTART)

        assert game.phase is GamePhase.RUNNING
        assert game.score == 0
        assert list(game.snake.positions) == [(5, 5)]
        assert game.direction is Direction.RIGHT
        assert game.delay_ms == 70
        assert game.food not in game.snake
        assert game.high_score == 12

    def test_restart_while_running_is_ignored(self):
        """Restart only applies to a finished game."""
        game = make_game()
        game.score = 3
        game.handle_command(Command.RESTART)
        assert game.score == 3


class TestDifficultyProgression:
    """Tests for the speed-up at level boundaries."""

    def test_delay_drops_exactly_at_level_crossing(self):
        """Delay changes on the tick that reaches score 10, not before or after."""
        game = make_game()
        game.score = 8
        delays = []
        for x in (6, 7, 8):
            game.set_food((x, 5))
            game.tick()
            delays.append((game.score, game.delay_ms))

        assert delays == [(9, 70), (10, 65), (11, 65)]


class TestHighScore:
    """Tests for high score tracking and persistence."""

    def test_beating_high_score_persists(self):
        """Each food that lifts the score above the high score is saved."""
        game = make_game(stored_high_score=0)
        game.set_food((6, 5))

        game.tick()

        assert game.high_score == 1
        game.high_scores.save_high_score.assert_called_once_with(1)

    def test_lower_score_is_not_saved(self):
        """Scores below the stored high score are never written."""
        game = make_game(stored_high_score=5)
        game.set_food((6, 5))

        game.tick()

        assert game.high_score == 5
        game.high_scores.save_high_score.assert_not_called()

    def test_fatal_move_records_high_score(self):
        """Game over lifts the high score when the score beats it."""
        game = make_game(stored_high_score=2)
        game.score = 3
        game.snake = Snake([(0, 5)])
        game.direction = Direction.LEFT
        game.set_food((9, 9))

        state = game.tick()

        assert state.phase is GamePhase.OVER
        assert state.high_score == 3
        game.high_scores.save_high_score.assert_called_once_with(3)


    def test_quit_after_game_over_saves_once(self):
        """Quit from Over keeps the score saved at game over without writing it again."""
        game = make_game(stored_high_score=2)
        game.score = 3
        game.snake = Snake([(0, 5)])
        game.direction = Direction.LEFT
        game.set_food((9, 9))
        game.tick()

        game.handle_command(Command.QUIT)

        assert game.should_exit is True
        assert game.high_score == 3
        game.high_scores.save_high_score.assert_called_once_with(3)

    def test_quit_while_running_saves_better_score(self):
        """Quitting mid-game persists a score above the stored one."""
        game = make_game(stored_high_score=2)
        game.score = 4

        game.handle_command(Command.QUIT)

        game.high_scores.save_high_score.assert_called_once_with(4)

    def test_restart_keeps_high_score_saved_once(self):
        """Restart after a record game leaves exactly one save for that score."""
        game = make_game(stored_high_score=2)
        game.score = 5
        game.snake = Snake([(9, 5)])
        game.set_food((0, 0))
        game.tick()

        game.handle_command(Command.RESTART)

        assert game.score == 0
        assert game.high_score == 5
        game.high_scores.save_high_score.assert_called_once_with(5)


class TestRestartBoard:
    """Tests for re-measuring the board on restart."""

    def test_restart_uses_board_provider(self):
        """A board provider replaces the board when a new game starts."""
        provider = Mock(return_value=Board(6, 6))
        game = SnakeGame(Board(10, 10), rng=random.Random(1), board_provider=provider)
        game.snake = Snake([(9, 5)])
        game.set_food((0, 0))
        game.tick()

        game.handle_command(Command.RESTART)

        provider.assert_called_once()
        assert game.board == Board(6, 6)
        assert list(game.snake.positions) == [(3, 3)]
        assert game.board.in_bounds(game.food)

    def test_game_over_logs_final_board(self, caplog):
        """The final board is written to the debug log."""
        game = make_game()
        game.snake = Snake([(9, 5)])
        game.set_food((0, 0))

        with caplog.at_level(logging.DEBUG, logger="termsnake.engine"):
            game.tick()

        assert "Final board" in caplog.text
        assert "@" in caplog.text


class TestInvariants:
    """Randomised play keeps the board consistent."""

    def test_random_play_preserves_invariants(self):
        """No duplicate cells, snake in bounds, food off the snake, score non-decreasing."""
        game = make_game(width=8, height=8, seed=99)
        rng = random.Random(5)
        commands = [None, None, Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT]
        last_score = 0

        for _ in range(2000):
            state = game.tick(rng.choice(commands))
            cells = state.snake_positions

            assert len(set(cells)) == len(cells)
            if state.food is not None:
                assert state.food not in cells

            if state.phase is GamePhase.OVER:
                game.handle_command(Command.RESTART)
                last_score = 0
                continue

            assert all(state.board.in_bounds(cell) for cell in cells)
            assert state.score >= last_score
            last_score = state.score
