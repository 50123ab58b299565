"""
Board and timing settings for a game session.
"""

from dataclasses import dataclass

from .constants import (
    BASE_SNAKE_LENGTH,
    DEFAULT_HEIGHT,
    DEFAULT_TICK_MS,
    DEFAULT_WIDTH,
)
from .geometry import board_center


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed for the lifetime of the process.

    Raises:
        ValueError: on non-integer or non-positive values, or a board too
            small to hold the starting snake
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS

    def __post_init__(self):
        for name in ("width", "height", "tick_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        # The starting snake hangs down from the board center.
        x, y = board_center(self.width, self.height)
        if x >= self.width or y + BASE_SNAKE_LENGTH - 1 >= self.height:
            raise ValueError(
                f"Board {self.width}x{self.height} is too small for the "
                f"starting snake at {(x, y)}"
            )

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000
