"""
Random player implementation - presses random safe arrow keys.
"""

import random
from typing import List, Optional

from domain.constants import KEY_FOR_DIRECTION, VALID_MOVES, Direction
from domain.game_state import GameState
from domain.geometry import is_out_of_bounds, move_coordinate, opposite
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls and self-collisions.

    It presses at most one key per tick, so it never answers twice for the
    same tick_count.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self._last_tick: Optional[int] = None

    def get_key(self, game_state: GameState) -> Optional[str]:
        if self._last_tick == game_state.tick_count:
            return None
        self._last_tick = game_state.tick_count

        snake_positions = list(game_state.snake)
        reverse = opposite(game_state.direction)

        # Filter out moves that:
        # 1. Turn back onto the neck
        # 2. Hit walls
        # 3. Hit own body, tail included (it only moves after the collision check)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if move == reverse:
                continue

            new_head = move_coordinate(game_state.snake.head, move)
            if is_out_of_bounds(new_head, game_state.width, game_state.height):
                continue

            if new_head in snake_positions:
                continue

            valid_moves.append(move)

        # If no valid moves, just keep going (we'll die anyway)
        if not valid_moves:
            return None

        return KEY_FOR_DIRECTION[self.rng.choice(valid_moves)]
