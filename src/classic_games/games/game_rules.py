"""
Shared rule helpers for grid and board games.

Grid helpers work on Position values; board helpers work on flat 9-cell
sequences using the pre-computed WIN_LINES table.
"""

from __future__ import annotations

from typing import AbstractSet, List, Optional, Sequence, Tuple

import numpy as np

from classic_games.core.types import Direction, Position

# Pre-computed winning lines (indices into flattened 3x3 board)
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)

# Plain tuples for the hot loops of the search
_WIN_LINE_TUPLES: Tuple[Tuple[int, int, int], ...] = tuple(
    tuple(int(i) for i in line) for line in WIN_LINES
)

BOARD_CELLS = 9

# Neighbour order used by random walks: +x, -x, +y, -y
NEIGHBOUR_ORDER = (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

def in_bounds(pos: Position, grid_size: int) -> bool:
    """Return True if pos is inside a square grid."""
    return 0 <= pos.x < grid_size and 0 <= pos.y < grid_size


def step(pos: Position, direction: Direction) -> Position:
    """One unbounded step; the result may leave the grid."""
    return Position(pos.x + direction.dx, pos.y + direction.dy)


def wrap_step(pos: Position, direction: Direction, grid_size: int) -> Position:
    """One step on a torus: coordinates wrap modulo grid_size."""
    return Position(
        (pos.x + direction.dx + grid_size) % grid_size,
        (pos.y + direction.dy + grid_size) % grid_size,
    )


def open_neighbours(
    pos: Position, walls: AbstractSet[Position], grid_size: int
) -> List[Position]:
    """Orthogonal neighbours that are on the grid and not walls."""
    cells = []
    for direction in NEIGHBOUR_ORDER:
        nxt = step(pos, direction)
        if in_bounds(nxt, grid_size) and nxt not in walls:
            cells.append(nxt)
    return cells


def wall_mask_to_cells(mask: np.ndarray) -> frozenset:
    """
    Convert a boolean (rows, cols) mask into a set of wall positions.
    mask[y, x] is True for a wall at Position(x, y).
    """
    return frozenset(Position(int(x), int(y)) for y, x in np.argwhere(mask))


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

def winning_line(cells: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    """Return the first line holding three equal non-empty marks, if any."""
    for a, b, c in _WIN_LINE_TUPLES:
        v = cells[a]
        if v != 0 and cells[b] == v and cells[c] == v:
            return (a, b, c)
    return None


def winner_of(cells: Sequence[int]) -> int:
    """Return the winning mark value, or 0 if nobody has a line."""
    line = winning_line(cells)
    return int(cells[line[0]]) if line else 0


def empty_cells(cells: Sequence[int]) -> List[int]:
    """Indices of empty cells in increasing order."""
    return [i for i, v in enumerate(cells) if v == 0]


def board_full(cells: Sequence[int]) -> bool:
    """Return True if no cell is empty."""
    return all(v != 0 for v in cells)


def as_grid(cells: Sequence[int]) -> np.ndarray:
    """Reshape a flat 9-cell board into a 3x3 int8 array."""
    return np.asarray(cells, dtype=np.int8).reshape(3, 3)
