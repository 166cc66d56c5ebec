"""
termsnake entry point: terminal setup, the fixed-cadence game loop, teardown.
"""

import argparse
import curses
import logging
import os
import sys
import time
from typing import Callable, Optional, List

from dotenv import load_dotenv

from termsnake.data_access import HighScoreRepository
from termsnake.domain import GameState, TerminalTooSmallError
from termsnake.engine import SnakeGame
from termsnake.services import (
    configure_screen,
    board_for_screen,
    CursesRenderer,
    KeyboardInput,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    """
    Log to TSNAKE_LOG_FILE when set. Curses owns the terminal while the game
    runs, so without a file the records are discarded.
    """
    level_name = os.getenv('TSNAKE_LOG_LEVEL', 'INFO').strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    log_file = os.getenv('TSNAKE_LOG_FILE', '').strip()

    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])


def run_game(
    game: SnakeGame,
    renderer,
    input_source,
    sleep: Callable[[float], None] = time.sleep,
) -> GameState:
    """
    Run the loop until the player quits:
      1) Poll one input event (non-blocking)
      2) Apply it and advance the simulation if running
      3) Render
      4) Sleep for the current tick delay

    Returns the final snapshot.
    """
    while True:
        state = game.tick(input_source.poll_event())
        renderer.render(state)
        if game.should_exit:
            return state
        sleep(state.delay_ms / 1000)


def play(stdscr, high_scores: Optional[HighScoreRepository] = None) -> GameState:
    """Set up the screen and play until quit. Meant to be called through curses.wrapper."""
    use_color = configure_screen(stdscr)
    board = board_for_screen(stdscr)
    logger.info("Starting game on a %dx%d board", board.width, board.height)

    game = SnakeGame(
        board,
        high_scores=high_scores or HighScoreRepository(),
        board_provider=lambda: board_for_screen(stdscr),
    )
    return run_game(game, CursesRenderer(stdscr, use_color=use_color), KeyboardInput(stdscr))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Arrow keys steer, 'p' pauses, 'r' restarts, 'q' quits."
    )
    parser.parse_args(argv)

    load_dotenv()
    configure_logging()

    try:
        final_state = curses.wrapper(play)
    except TerminalTooSmallError as e:
        print(e, file=sys.stderr)
        return 1
    except MemoryError:
        logger.exception("Out of memory")
        print("Out of memory!", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    logger.info("Exited with score %d, high score %d", final_state.score, final_state.high_score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
