"""
Game constants for the snake game.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. y grows downward, so UP decreases y."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"


class GameStatus(str, Enum):
    IN_GAME = "IN_GAME"
    WON = "WON"
    LOST = "LOST"


class CellKind(str, Enum):
    EMPTY = "EMPTY"
    SNAKE = "SNAKE"
    FOOD = "FOOD"


# Movement directions
UP = Direction.UP
RIGHT = Direction.RIGHT
DOWN = Direction.DOWN
LEFT = Direction.LEFT
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

TERMINAL_STATUSES = {GameStatus.WON, GameStatus.LOST}

# Raw key identifiers delivered by input sources
ARROW_KEYS = {
    "ArrowUp": UP,
    "ArrowRight": RIGHT,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
}
KEY_FOR_DIRECTION = {direction: key for key, direction in ARROW_KEYS.items()}

# Game settings
DEFAULT_WIDTH = 17
DEFAULT_HEIGHT = 17
DEFAULT_TICK_MS = 180
BASE_SNAKE_LENGTH = 3
