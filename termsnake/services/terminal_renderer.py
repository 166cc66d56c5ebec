"""
Curses renderer for termsnake.

Screen layout (row numbers for a board of height h):
  0        top border with score, high score and pause marker
  1..h     play field, framed by vertical borders
  h+1      status box top, with the speed level
  h+2      level progress bar
  h+3      status box bottom
Board cell (x, y) is drawn at screen position (y + 1, x + 1).
"""

import curses
from typing import Dict

from termsnake.domain import GameState
from .terminal import PROGRESS_COLOR_PAIR

FOOD_CHAR = 'O'
SNAKE_CHAR = '#'
GAME_OVER_TEXT = "*** GAME OVER ***"
RESTART_TEXT = "Press 'r' to restart or 'q' to quit"


def _glyphs() -> Dict[str, int]:
    """Line-drawing characters; ACS constants only exist once curses is initialised."""
    fallback = {
        'ULCORNER': '+', 'URCORNER': '+', 'LLCORNER': '+', 'LRCORNER': '+',
        'LTEE': '+', 'RTEE': '+', 'HLINE': '-', 'VLINE': '|', 'BLOCK': '#',
    }
    return {
        name: getattr(curses, f'ACS_{name}', ord(char))
        for name, char in fallback.items()
    }


class CursesRenderer:
    """
    Draws GameState snapshots onto a curses window. Holds no game state.
    """

    def __init__(self, stdscr, use_color: bool = True):
        self.stdscr = stdscr
        self.progress_attr = curses.color_pair(PROGRESS_COLOR_PAIR) if use_color else 0
        self.glyphs = _glyphs()

    def render(self, state: GameState):
        self.stdscr.erase()

        self._draw_frame(state)
        self._draw_header(state)

        if state.food is not None:
            fx, fy = state.food
            self._put(fy + 1, fx + 1, ord(FOOD_CHAR))

        for x, y in state.snake_positions:
            self._put(y + 1, x + 1, ord(SNAKE_CHAR))

        self._draw_status(state)

        if state.game_over:
            self._draw_game_over(state)

        self.stdscr.refresh()

    def _put(self, y: int, x: int, ch: int, attr: int = 0):
        try:
            self.stdscr.addch(y, x, ch, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def _hline(self, y: int, x: int, ch: int, n: int):
        try:
            self.stdscr.hline(y, x, ch, n)
        except curses.error:
            pass

    def _text(self, y: int, x: int, text: str):
        try:
            self.stdscr.addstr(y, x, text)
        except curses.error:
            # The window can shrink below the board until the next restart.
            pass

    def _draw_frame(self, state: GameState):
        g = self.glyphs
        width, height = state.board.width, state.board.height
        right = width + 1

        self._put(0, 0, g['ULCORNER'])
        self._hline(0, 1, g['HLINE'], width)
        self._put(0, right, g['URCORNER'])

        for y in range(1, height + 1):
            self._put(y, 0, g['VLINE'])
            self._put(y, right, g['VLINE'])

    def _draw_header(self, state: GameState):
        text = f" Score: {state.score}  High: {state.high_score} "
        if state.paused:
            text += "[PAUSED] "
        self._text(0, 2, text[:max(0, state.board.width - 1)])

    def _draw_status(self, state: GameState):
        g = self.glyphs
        width = state.board.width
        right = width + 1
        status_y = state.board.height + 1

        self._put(status_y, 0, g['LTEE'])
        self._hline(status_y, 1, g['HLINE'], width)
        self._put(status_y, right, g['RTEE'])

        self._put(status_y + 1, 0, g['VLINE'])
        self._put(status_y + 1, right, g['VLINE'])
        filled = state.level_progress * width // state.level_size
        for i in range(filled):
            self._put(status_y + 1, 1 + i, g['BLOCK'], self.progress_attr)

        self._put(status_y + 2, 0, g['LLCORNER'])
        self._hline(status_y + 2, 1, g['HLINE'], width)
        self._put(status_y + 2, right, g['LRCORNER'])

        label = f" Speed Level: {state.speed_level} "
        self._text(status_y, 2, label[:max(0, width - 1)])

    def _draw_game_over(self, state: GameState):
        width, height = state.board.width, state.board.height
        middle = height // 2 + 1
        for offset, text in enumerate((GAME_OVER_TEXT, RESTART_TEXT)):
            text = text[:width]
            x = 1 + max(0, (width - len(text)) // 2)
            self._text(middle + offset, x, text)
