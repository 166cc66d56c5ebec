"""
Curses screen setup.

Teardown is left to curses.wrapper, which restores the terminal on normal
exit and on any exception.
"""

import curses
import logging

from termsnake.domain import Board

logger = logging.getLogger(__name__)

PROGRESS_COLOR_PAIR = 1


def configure_screen(stdscr) -> bool:
    """
    Put the screen into game mode: hidden cursor, non-blocking reads.

    Returns:
        True if colors are available.
    """
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal does not support hiding the cursor")
    stdscr.nodelay(True)
    stdscr.keypad(True)

    if not curses.has_colors():
        return False
    curses.start_color()
    curses.init_pair(PROGRESS_COLOR_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
    return True


def board_for_screen(stdscr) -> Board:
    rows, columns = stdscr.getmaxyx()
    return Board.from_terminal(rows, columns)
