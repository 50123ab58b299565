"""
Keyboard input through curses.
"""

import curses
from typing import Optional

from domain.game_state import GameState
from .base import Player

CURSES_KEY_NAMES = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_RIGHT: "ArrowRight",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
}
QUIT_KEYS = {ord("q"), ord("Q"), 27}  # 27 = Escape


def translate_curses_key(code: int) -> Optional[str]:
    """Map a curses key code to a key identifier; other keys keep their character."""
    if code in CURSES_KEY_NAMES:
        return CURSES_KEY_NAMES[code]
    if 0 <= code < curses.KEY_MIN:
        return chr(code)
    return None


class KeyboardPlayer(Player):
    """
    Reads keys from a curses window in non-blocking mode.

    Each call returns at most one pending key; the game loop keeps polling
    until None so every key press is applied in order.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)
        self._quit = False

    def get_key(self, game_state: GameState) -> Optional[str]:
        code = self.window.getch()
        if code == -1:
            return None
        if code in QUIT_KEYS:
            self._quit = True
            return None
        return translate_curses_key(code)

    def wants_quit(self) -> bool:
        return self._quit
