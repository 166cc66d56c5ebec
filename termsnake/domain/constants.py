"""
Game constants for termsnake.
"""

from enum import Enum


class Direction(Enum):
    """Movement directions as unit vectors in screen coordinates (y grows down)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0


class GamePhase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Command(Enum):
    """Events produced by the input source."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"
    RESTART = "restart"


COMMAND_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

DEFAULT_DIRECTION = Direction.RIGHT

# Speed settings (milliseconds per tick)
INITIAL_DELAY_MS = 70
SPEED_STEP_MS = 5
MIN_DELAY_MS = 50
LEVEL_SIZE = 10

# Terminal chrome around the playable area
BORDER_WIDTH = 2
STATUS_HEIGHT = 4
MIN_TERMINAL_COLUMNS = 20
MIN_TERMINAL_ROWS = 10

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"
