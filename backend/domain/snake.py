"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List

from .geometry import Coordinate, is_in_snake


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Coordinate]):
        self.positions = deque(positions)

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def push_head(self, coordinate: Coordinate) -> None:
        self.positions.appendleft(coordinate)

    def drop_tail(self) -> Coordinate:
        return self.positions.pop()

    def __contains__(self, coordinate) -> bool:
        return is_in_snake(self.positions, coordinate)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
