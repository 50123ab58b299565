"""
Domain entities for the snake game engine.

This module contains the core game entities and rules, independent of
presentation concerns (terminal drawing, image frames, timers).
"""

from .constants import (
    UP, RIGHT, DOWN, LEFT, VALID_MOVES, ARROW_KEYS,
    Direction, GameStatus, CellKind,
)
from .game_config import GameConfig
from .geometry import (
    Coordinate,
    is_same_coordinate,
    is_out_of_bounds,
    move_coordinate,
    is_in_snake,
    opposite,
)
from .snake import Snake
from .food import BoardFullError, get_food_position
from .game_state import GameState, base_snake_position, create_base_state
from .engine import advance
from .input_mapper import resolve_direction
from .board import classify, get_field

__all__ = [
    'UP', 'RIGHT', 'DOWN', 'LEFT', 'VALID_MOVES', 'ARROW_KEYS',
    'Direction', 'GameStatus', 'CellKind',
    'GameConfig',
    'Coordinate',
    'is_same_coordinate', 'is_out_of_bounds', 'move_coordinate', 'is_in_snake', 'opposite',
    'Snake',
    'BoardFullError', 'get_food_position',
    'GameState', 'base_snake_position', 'create_base_state',
    'advance',
    'resolve_direction',
    'classify', 'get_field',
]
