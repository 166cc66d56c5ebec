"""
Non-blocking keyboard polling.
"""

import curses
from typing import Optional

from termsnake.domain import Command

KEY_COMMANDS = {
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    ord('p'): Command.TOGGLE_PAUSE,
    ord('P'): Command.TOGGLE_PAUSE,
    ord('q'): Command.QUIT,
    ord('Q'): Command.QUIT,
    ord('r'): Command.RESTART,
    ord('R'): Command.RESTART,
}


def command_for_key(key: int) -> Optional[Command]:
    return KEY_COMMANDS.get(key)


class KeyboardInput:
    """
    Reads at most one key per poll from a curses window in nodelay mode.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def poll_event(self) -> Optional[Command]:
        """Return the command for the pending key, or None if no key is mapped or pending."""
        key = self.stdscr.getch()
        if key == -1:
            return None
        return command_for_key(key)
