"""
Cell classification used by renderers.
"""

from typing import List

from .constants import CellKind
from .game_state import GameState
from .geometry import Coordinate, is_same_coordinate

Field = List[List[CellKind]]


def classify(state: GameState, coordinate: Coordinate) -> CellKind:
    """Food takes precedence over the snake, matching the drawn field."""
    if state.food is not None and is_same_coordinate(state.food, coordinate):
        return CellKind.FOOD
    if coordinate in state.snake:
        return CellKind.SNAKE
    return CellKind.EMPTY


def get_field(state: GameState) -> Field:
    """
    Return the board as rows of CellKind, indexed field[y][x].

    Snake cells off the board (the crash cell of a losing tick) are simply
    not part of any row.
    """
    field = [[CellKind.EMPTY for _ in range(state.width)] for _ in range(state.height)]
    for x, y in state.snake:
        if 0 <= x < state.width and 0 <= y < state.height:
            field[y][x] = CellKind.SNAKE
    if state.food is not None:
        fx, fy = state.food
        field[fy][fx] = CellKind.FOOD
    return field
