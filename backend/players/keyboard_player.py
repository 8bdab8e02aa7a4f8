"""
Keyboard player - reads arrow keys from a curses window.
"""

import curses
import logging
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord("q"): QUIT,
}


class KeyboardPlayer(Player):
    """
    Reads at most one key per tick from a non-blocking curses window.

    Arrow keys turn the snake, 'q' leaves the session, anything else
    (or no key at all) keeps the current heading.
    """

    def __init__(self, window):
        self.window = window

    def get_move(self, game_state: GameState) -> Optional[str]:
        key = self.window.getch()
        if key == -1:
            return None
        move = KEY_BINDINGS.get(key)
        if move is None:
            logger.debug("Ignoring key %r", key)
        return move
