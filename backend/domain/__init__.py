"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
the terminal (curses) and the loop that drives them.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS, QUIT,
    WRAP, SOLID, BOUNDARY_POLICIES,
)
from .snake import Snake
from .game_state import GameState
from .grid import build_walls, interior_cells, is_interior, project_head, wrap_cell

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS', 'QUIT',
    'WRAP', 'SOLID', 'BOUNDARY_POLICIES',
    'Snake',
    'GameState',
    'build_walls', 'interior_cells', 'is_interior', 'project_head', 'wrap_cell',
]
