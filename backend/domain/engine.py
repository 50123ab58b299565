"""
Tick engine: advances the game by one cell per tick.
"""

import logging

from .constants import GameStatus
from .food import BoardFullError, get_food_position
from .game_state import GameState
from .geometry import is_out_of_bounds, is_same_coordinate, move_coordinate

logger = logging.getLogger(__name__)


def advance(state: GameState, rng=None) -> GameState:
    """
    Execute one tick, mutating and returning the state:
      1) Compute the new head from the current head and direction
      2) Mark the game LOST if the new head leaves the board or hits the
         snake as it stands before moving (tail cell included)
      3) Insert the new head at the front
      4) If the new head is on the food, keep the tail and place new food;
         otherwise remove the tail

    The head is inserted even on the losing tick so the final frame shows
    where the snake crashed. Ticks on a finished game do nothing.
    """
    if state.is_over:
        logger.debug(f"Ignoring tick on finished game ({state.status.value})")
        return state

    snake = state.snake
    new_head = move_coordinate(snake.head, state.direction)

    if is_out_of_bounds(new_head, state.width, state.height):
        state.status = GameStatus.LOST
        state.death_reason = "wall"
    elif new_head in snake:
        state.status = GameStatus.LOST
        state.death_reason = "self"

    fed = state.food is not None and is_same_coordinate(new_head, state.food)

    snake.push_head(new_head)
    if fed:
        eaten = state.food
        try:
            state.food = get_food_position(
                snake, state.width, state.height, current_food=eaten, rng=rng
            )
        except BoardFullError:
            state.food = None
            state.status = GameStatus.WON
    else:
        snake.drop_tail()

    state.tick_count += 1

    if state.status == GameStatus.LOST:
        logger.info(
            f"Snake died ({state.death_reason}) at {new_head} on tick {state.tick_count}"
        )
    elif state.status == GameStatus.WON:
        logger.info(f"Board filled on tick {state.tick_count} with length {len(snake)}")
    elif fed:
        logger.debug(f"Ate food at {new_head}; length {len(snake)}, next food {state.food}")

    return state
