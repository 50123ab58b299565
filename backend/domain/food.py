"""
Random food placement.
"""

import logging
import random
from typing import Iterable, Optional

from .geometry import Coordinate, is_in_snake, is_same_coordinate

logger = logging.getLogger(__name__)


class BoardFullError(ValueError):
    """Raised when every cell of the board is taken and food cannot be placed."""


def get_random_coordinate(width: int, height: int, rng=None) -> Coordinate:
    rng = rng or random
    return (rng.randrange(width), rng.randrange(height))


def get_food_position(
    snake: Iterable[Coordinate],
    width: int,
    height: int,
    current_food: Optional[Coordinate] = None,
    rng=None,
) -> Coordinate:
    """
    Return a random cell that is neither on the snake nor the current food.

    Candidates are sampled uniformly until one is free, so placement slows
    down as the board fills up.

    Args:
        snake: cells occupied by the snake
        width, height: board dimensions
        current_food: the food being replaced, if any
        rng: a random.Random-like source; defaults to the random module

    Raises:
        BoardFullError: if no free cell exists
    """
    snake = list(snake)
    taken = set(snake)
    if current_food is not None:
        taken.add(current_food)
    free_cells = sum(
        1 for x in range(width) for y in range(height) if (x, y) not in taken
    )
    if free_cells == 0:
        raise BoardFullError(f"No free cell left on a {width}x{height} board")

    attempts = 1
    candidate = get_random_coordinate(width, height, rng)
    while (
        (current_food is not None and is_same_coordinate(candidate, current_food))
        or is_in_snake(snake, candidate)
    ):
        candidate = get_random_coordinate(width, height, rng)
        attempts += 1

    logger.debug(f"Placed food at {candidate} after {attempts} attempt(s)")
    return candidate
