"""Enumeration of the south-east and south-west diagonals of a grid.

Each orientation needs two families of start points. For south-east lines
the first family starts on the left column, walking down from the corner,
and the second on the top row, walking right from column 1. South-west is
the mirror image: right column first, then the top row walking left from
``cols - 2``. Within a family diagonal lengths never grow, so a family is
abandoned at the first diagonal shorter than ``min_length``.
"""

from __future__ import annotations

from typing import Iterator

from ..core.constants import LineDirection
from ..core.models import LineView
from .grid import PuzzleGrid


def south_east_diagonals(grid: PuzzleGrid, min_length: int = 1) -> Iterator[LineView]:
    n, m = grid.rows, grid.cols
    for row in range(n):
        length = min(n - row, m)
        if length < min_length:
            break
        yield grid.line_view((row, 0), LineDirection.SOUTH_EAST, length)
    for col in range(1, m):
        length = min(n, m - col)
        if length < min_length:
            break
        yield grid.line_view((0, col), LineDirection.SOUTH_EAST, length)


def south_west_diagonals(grid: PuzzleGrid, min_length: int = 1) -> Iterator[LineView]:
    n, m = grid.rows, grid.cols
    for row in range(n):
        length = min(n - row, m)
        if length < min_length:
            break
        yield grid.line_view((row, m - 1), LineDirection.SOUTH_WEST, length)
    for col in range(m - 2, -1, -1):
        length = min(n, col + 1)
        if length < min_length:
            break
        yield grid.line_view((0, col), LineDirection.SOUTH_WEST, length)


def diagonals(grid: PuzzleGrid, direction: LineDirection, min_length: int = 1) -> Iterator[LineView]:
    if direction == LineDirection.SOUTH_EAST:
        return south_east_diagonals(grid, min_length)
    if direction == LineDirection.SOUTH_WEST:
        return south_west_diagonals(grid, min_length)
    raise ValueError(f"{direction.value} is not a diagonal direction")
