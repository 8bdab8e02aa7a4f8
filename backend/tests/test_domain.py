"""
Tests for the domain entities: Snake, GameState and grid helpers.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Snake,
    GameState,
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    DIRECTION_VECTORS,
    WRAP, SOLID,
    build_walls,
    interior_cells,
    is_interior,
    project_head,
    wrap_cell,
)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_tick is None

    def test_snake_head_and_length(self):
        """Snake.head is the first cell and len() counts every cell."""
        snake = Snake([(5, 5), (5, 6), (5, 7)])
        assert snake.head == (5, 5)
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_membership(self):
        """`in` checks every body cell."""
        snake = Snake([(5, 5), (5, 6)])
        assert (5, 6) in snake
        assert (5, 7) not in snake

    def test_snake_rejects_empty_body(self):
        """A snake needs at least one cell."""
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_rejects_duplicate_cells(self):
        """A snake cannot occupy the same cell twice."""
        with pytest.raises(ValueError, match="unique"):
            Snake([(5, 5), (5, 6), (5, 5)])

    def test_snake_kill(self):
        """kill() records the death reason and tick."""
        snake = Snake([(5, 5)])
        snake.kill("self", 12)
        assert snake.alive is False
        assert snake.death_reason == "self"
        assert snake.death_tick == 12


class TestConstants:
    """Tests for direction constants."""

    def test_valid_moves(self):
        assert VALID_MOVES == {UP, DOWN, LEFT, RIGHT}

    def test_direction_vectors_are_unit_vectors(self):
        assert DIRECTION_VECTORS[UP] == (-1, 0)
        assert DIRECTION_VECTORS[DOWN] == (1, 0)
        assert DIRECTION_VECTORS[LEFT] == (0, -1)
        assert DIRECTION_VECTORS[RIGHT] == (0, 1)


class TestGrid:
    """Tests for wall, interior and boundary helpers."""

    def test_build_walls_is_the_boundary_ring(self):
        """The wall is every cell on the outer ring and nothing else."""
        walls = build_walls(42, 22)
        assert len(walls) == 2 * 42 + 2 * 20
        assert (0, 0) in walls
        assert (21, 41) in walls
        assert (0, 17) in walls
        assert (9, 41) in walls
        assert (1, 1) not in walls

    def test_interior_cells(self):
        cells = interior_cells(42, 22)
        assert len(cells) == 40 * 20
        assert (1, 1) in cells
        assert (20, 40) in cells
        assert (0, 5) not in cells

    def test_is_interior(self):
        assert is_interior((1, 1), 42, 22)
        assert is_interior((20, 40), 42, 22)
        assert not is_interior((0, 5), 42, 22)
        assert not is_interior((5, 41), 42, 22)

    def test_wrap_cell_for_each_edge(self):
        """A cell on the wall moves to the opposite interior edge."""
        assert wrap_cell((5, 41), 42, 22) == (5, 1)
        assert wrap_cell((5, 0), 42, 22) == (5, 40)
        assert wrap_cell((21, 7), 42, 22) == (1, 7)
        assert wrap_cell((0, 7), 42, 22) == (20, 7)

    def test_wrap_cell_leaves_interior_untouched(self):
        assert wrap_cell((5, 5), 42, 22) == (5, 5)

    def test_project_head_moves_one_cell(self):
        assert project_head((5, 5), RIGHT, 42, 22) == (5, 6)
        assert project_head((5, 5), LEFT, 42, 22) == (5, 4)
        assert project_head((5, 5), UP, 42, 22) == (4, 5)
        assert project_head((5, 5), DOWN, 42, 22) == (6, 5)

    def test_project_head_wraps(self):
        assert project_head((5, 40), RIGHT, 42, 22, WRAP) == (5, 1)
        assert project_head((1, 5), UP, 42, 22, WRAP) == (20, 5)

    def test_project_head_solid_returns_wall_cell(self):
        """Under the solid policy the wall cell itself is returned."""
        assert project_head((5, 40), RIGHT, 42, 22, SOLID) == (5, 41)

    def test_project_head_rejects_unknown_policy(self):
        with pytest.raises(ValueError, match="boundary"):
            project_head((5, 5), RIGHT, 42, 22, "bounce")


class TestGameState:
    """Tests for the GameState class."""

    def _state(self, **overrides):
        params = dict(
            tick_number=3,
            width=5,
            height=5,
            snake=[(2, 2), (2, 3)],
            heading=LEFT,
            speed=4,
            apples=[(1, 1)],
            walls=build_walls(5, 5),
        )
        params.update(overrides)
        return GameState(**params)

    def test_gamestate_initialization(self):
        """GameState initializes with all required attributes."""
        state = self._state()
        assert state.tick_number == 3
        assert state.width == 5
        assert state.height == 5
        assert state.snake == [(2, 2), (2, 3)]
        assert state.heading == LEFT
        assert state.speed == 4
        assert state.apples == [(1, 1)]
        assert state.alive is True
        assert state.death_reason is None
        assert state.boundary == WRAP

    def test_gamestate_head_and_score(self):
        """The score is the snake length."""
        state = self._state()
        assert state.head == (2, 2)
        assert state.score == 2

    def test_gamestate_print_board(self):
        """print_board draws walls, snake, apples and the score line."""
        board = self._state().print_board()
        assert board.split("\n") == [
            "#####",
            "#o  #",
            "# OO#",
            "#   #",
            "#####",
            "Score: 2",
        ]

    def test_gamestate_repr(self):
        """GameState has a useful string representation."""
        text = repr(self._state())
        assert "tick=3" in text
        assert "score=2" in text
        assert "heading=LEFT" in text
