"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, SOLID
from domain.game_state import GameState
from domain.grid import project_head
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding the wall (under the
    solid boundary policy) and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        body = set(game_state.snake)

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            nxt = project_head(
                game_state.head, move, game_state.width, game_state.height, game_state.boundary
            )
            # Check wall collisions
            if game_state.boundary == SOLID and nxt in game_state.walls:
                continue
            # Check self collisions (the tail counts, it is checked before it moves)
            if nxt in body:
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
