"""
Player implementations for the terminal snake game.

This module contains the input sources that decide the snake's
direction on every tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
