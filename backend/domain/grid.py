"""
Grid geometry helpers: the wall ring, interior cells and the boundary policy.

Cells are (row, col) tuples. The wall is the outermost ring of the grid;
everything inside it is the interior where the snake and apples live.
"""

from typing import FrozenSet, List, Tuple

from .constants import DIRECTION_VECTORS, WRAP, SOLID, BOUNDARY_POLICIES

Cell = Tuple[int, int]


def build_walls(width: int, height: int) -> FrozenSet[Cell]:
    """Return every boundary cell of a width x height grid."""
    return frozenset(
        (row, col)
        for row in range(height)
        for col in range(width)
        if row in (0, height - 1) or col in (0, width - 1)
    )


def is_interior(cell: Cell, width: int, height: int) -> bool:
    row, col = cell
    return 1 <= row <= height - 2 and 1 <= col <= width - 2


def interior_cells(width: int, height: int) -> List[Cell]:
    return [(row, col) for row in range(1, height - 1) for col in range(1, width - 1)]


def wrap_cell(cell: Cell, width: int, height: int) -> Cell:
    """
    Move a cell that landed on the wall to the opposite interior edge.

    Interior cells are returned untouched.
    """
    row, col = cell
    if col >= width - 1:
        col = 1
    elif col <= 0:
        col = width - 2
    if row >= height - 1:
        row = 1
    elif row <= 0:
        row = height - 2
    return (row, col)


def project_head(head: Cell, move: str, width: int, height: int, boundary: str = WRAP) -> Cell:
    """
    Return the cell the head moves to for the given direction.

    Under the wrap policy the result is always an interior cell. Under the
    solid policy a wall cell is returned as-is so the caller can treat it as
    a collision.
    """
    if boundary not in BOUNDARY_POLICIES:
        raise ValueError(f"Unknown boundary policy '{boundary}'.")
    d_row, d_col = DIRECTION_VECTORS[move]
    nxt = (head[0] + d_row, head[1] + d_col)
    if boundary == SOLID or is_interior(nxt, width, height):
        return nxt
    return wrap_cell(nxt, width, height)
