"""
Terminal-facing services: screen setup, rendering, keyboard input.
"""

from .terminal import configure_screen, board_for_screen, PROGRESS_COLOR_PAIR
from .terminal_renderer import CursesRenderer
from .keyboard_input import KeyboardInput, command_for_key

__all__ = [
    'configure_screen',
    'board_for_screen',
    'PROGRESS_COLOR_PAIR',
    'CursesRenderer',
    'KeyboardInput',
    'command_for_key',
]
