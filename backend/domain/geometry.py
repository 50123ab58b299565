"""
Coordinate arithmetic for the board.

Coordinates are plain (x, y) tuples. The origin is the top-left cell and
y grows downward.
"""

from typing import Iterable, Tuple

from .constants import Direction

Coordinate = Tuple[int, int]


def is_same_coordinate(a: Coordinate, b: Coordinate) -> bool:
    """Structural equality on (x, y)."""
    x1, y1 = a
    x2, y2 = b
    return x1 == x2 and y1 == y2


def is_out_of_bounds(coordinate: Coordinate, width: int, height: int) -> bool:
    """True when the coordinate falls outside a width x height board."""
    x, y = coordinate
    return x < 0 or x >= width or y < 0 or y >= height


def move_coordinate(coordinate: Coordinate, direction: Direction) -> Coordinate:
    """Translate a coordinate by one cell. There is no wraparound."""
    x, y = coordinate
    if direction == Direction.UP:
        return (x, y - 1)
    elif direction == Direction.RIGHT:
        return (x + 1, y)
    elif direction == Direction.DOWN:
        return (x, y + 1)
    elif direction == Direction.LEFT:
        return (x - 1, y)
    raise ValueError(f"Unknown direction: {direction!r}")


def board_center(width: int, height: int) -> Coordinate:
    """Center cell, rounding halves up (a 17-wide board centers on 9)."""
    return ((width + 1) // 2, (height + 1) // 2)


def is_in_snake(snake: Iterable[Coordinate], coordinate: Coordinate) -> bool:
    return any(is_same_coordinate(cell, coordinate) for cell in snake)


def opposite(direction: Direction) -> Direction:
    if direction == Direction.UP:
        return Direction.DOWN
    elif direction == Direction.DOWN:
        return Direction.UP
    elif direction == Direction.LEFT:
        return Direction.RIGHT
    elif direction == Direction.RIGHT:
        return Direction.LEFT
    raise ValueError(f"Unknown direction: {direction!r}")
