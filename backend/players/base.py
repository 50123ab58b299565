"""
Base input source interface for the game session.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player is polled by the game loop between ticks and answers with a
    raw key identifier, the same names a keyboard delivers.
    """

    def get_key(self, game_state: GameState) -> Optional[str]:
        """
        Return the next key pressed, if any.

        Args:
            game_state: Current state of the game

        Returns:
            A key identifier such as "ArrowUp", or None when nothing was pressed
        """
        raise NotImplementedError

    def wants_quit(self) -> bool:
        """True once the player asked to leave the game."""
        return False
