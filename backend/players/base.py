"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player is polled once per tick and answers with the direction the
    snake should take next.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", None to keep the current
            heading, or "QUIT" to leave the session.
        """
        raise NotImplementedError
