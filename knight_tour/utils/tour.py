"""Tour predicates and path helpers.

Pure functions over a grid of move numbers. They never mutate the grid and
work on any array-like ``8x8`` input (numpy arrays, nested lists).
"""

from typing import List

import numpy as np

from knight_tour.moves import BOARD_SIZE, SQUARE_COUNT, is_knight_move
from knight_tour.types import Coord, Grid


def tour_path(grid: Grid) -> List[Coord]:
    """Return visited squares ordered by move number (smallest first)."""
    flat = np.asarray(grid).ravel()
    order = np.argsort(flat, kind="stable")
    visited = order[flat[order] > 0]
    return [divmod(int(index), BOARD_SIZE) for index in visited]


def is_contiguous_path(grid: Grid) -> bool:
    """Return True if the nonzero cells hold ``1..m`` along knight moves.

    An empty grid (``m == 0``) counts as a valid path.
    """
    values = np.asarray(grid)
    if values.shape != (BOARD_SIZE, BOARD_SIZE):
        return False
    nonzero = np.sort(values[values != 0])
    if not np.array_equal(nonzero, np.arange(1, len(nonzero) + 1)):
        return False
    path = tour_path(values)
    return all(is_knight_move(a, b) for a, b in zip(path, path[1:]))


def is_valid_tour(grid: Grid) -> bool:
    """Return True if ``grid`` is a complete open knight's tour."""
    return count_visited(grid) == SQUARE_COUNT and is_contiguous_path(grid)


def count_visited(grid: Grid) -> int:
    return int(np.count_nonzero(np.asarray(grid)))


def square_name(pos: Coord) -> str:
    """Chess-style label for a square, e.g. ``(0, 0) -> "A1"``."""
    row, col = pos
    return f"{'ABCDEFGH'[col]}{row + 1}"
