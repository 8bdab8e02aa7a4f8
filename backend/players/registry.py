"""
Registry for player implementations.

Maps player keys (e.g., 'keyboard', 'random') to player classes.
"""

from typing import Callable, Dict, Type
from .base import Player


# Lazy imports so headless runs never import the curses-backed player
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: str) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'keyboard' or 'random'.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> list:
    """
    Return metadata about all available players.
    """
    return [
        {"key": "keyboard", "description": "Arrow keys steer the snake, 'q' leaves the session"},
        {"key": "random", "description": "Autopilot that picks a random safe direction every tick"},
    ]
