"""
Input sources for the snake game.

A player delivers raw key identifiers ("ArrowUp", ...) that the game
session feeds through the input mapper.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard_player import KeyboardPlayer, translate_curses_key

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyboardPlayer',
    'translate_curses_key',
]
