"""
GameState entity - the authoritative, mutable state of the running game.
"""

from typing import Any, List, Optional

from .constants import BASE_SNAKE_LENGTH, TERMINAL_STATUSES, Direction, GameStatus
from .food import get_food_position
from .game_config import GameConfig
from .geometry import Coordinate, board_center
from .snake import Snake


class GameState:
    """
    The state of the single active game.

    Attributes:
        status: IN_GAME until the snake dies (LOST) or fills the board (WON)
        snake: the Snake, head first
        food: (x, y) of the food, or None once the board is full
        direction: direction applied on the next tick
        width, height: board dimensions
        tick_count: number of ticks processed so far
        death_reason: 'wall' or 'self' once LOST
        timer_handle: opaque handle owned by the tick scheduler
    """

    def __init__(
        self,
        snake: Snake,
        food: Optional[Coordinate],
        width: int,
        height: int,
        direction: Direction = Direction.UP,
        status: GameStatus = GameStatus.IN_GAME,
    ):
        self.status = status
        self.snake = snake
        self.food = food
        self.direction = direction
        self.width = width
        self.height = height
        self.tick_count = 0
        self.death_reason: Optional[str] = None
        self.timer_handle: Any = None

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, status={self.status.value}, "
            f"head={self.snake.head}, length={len(self.snake)}, food={self.food}>"
        )


def base_snake_position(width: int, height: int) -> List[Coordinate]:
    """Three cells stacked vertically, head at the board center."""
    x, y = board_center(width, height)
    return [(x, y + offset) for offset in range(BASE_SNAKE_LENGTH)]


def create_base_state(config: Optional[GameConfig] = None, rng=None) -> GameState:
    """
    Create the starting state: centered snake facing UP with fresh food.

    Args:
        config: board settings, defaults to GameConfig()
        rng: random source used for the first food placement
    """
    config = config or GameConfig()
    positions = base_snake_position(config.width, config.height)
    return GameState(
        snake=Snake(positions),
        food=get_food_position(positions, config.width, config.height, rng=rng),
        width=config.width,
        height=config.height,
        direction=Direction.UP,
        status=GameStatus.IN_GAME,
    )
