"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (row, col) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'self' or 'wall'
        death_tick: the tick number when the snake died
    """

    def __init__(self, positions: List[Cell]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake cells must be unique, got {positions}.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.positions

    def kill(self, reason: str, tick: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick
