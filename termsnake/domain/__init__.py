"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, high score file).
"""

from .constants import Direction, GamePhase, Command, DEFAULT_DIRECTION, LEVEL_SIZE
from .board import Board, TerminalTooSmallError
from .snake import Snake
from .food import place_food, BoardFullError
from .difficulty import compute_delay, speed_level, level_progress
from .game_state import GameState

__all__ = [
    'Direction', 'GamePhase', 'Command', 'DEFAULT_DIRECTION', 'LEVEL_SIZE',
    'Board', 'TerminalTooSmallError',
    'Snake',
    'place_food', 'BoardFullError',
    'compute_delay', 'speed_level', 'level_progress',
    'GameState',
]
