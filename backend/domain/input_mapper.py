"""
Maps raw key identifiers to a snake direction.
"""

from .constants import ARROW_KEYS, Direction
from .geometry import opposite


def resolve_direction(key: str, current_direction: Direction) -> Direction:
    """
    Return the direction requested by `key`.

    Keys other than the four arrows are ignored, and so is a request to turn
    straight back onto the neck; both return `current_direction`.
    """
    direction = ARROW_KEYS.get(key)
    if direction is None:
        return current_direction
    if direction == opposite(current_direction):
        return current_direction
    return direction
