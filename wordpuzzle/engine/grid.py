"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..core.constants import BLANK, MAX_COLS, MAX_ROWS, Bounds, LineDirection
from ..core.exceptions import GridDimensionError
from ..core.models import LineView
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values bounding the puzzle extent."""

    max_rows: int = MAX_ROWS
    max_cols: int = MAX_COLS
    blank: str = BLANK

    def accepts(self, rows: int, cols: int) -> bool:
        return 1 <= rows <= self.max_rows and 1 <= cols <= self.max_cols


class PuzzleGrid:
    """Owns the read-only puzzle and the solution buffer filled by placements."""

    def __init__(self, rows: Sequence[Sequence[str]], config: GridConfig | None = None) -> None:
        self.config = config or GridConfig()
        self._puzzle: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in rows)
        self._validate()
        self.bounds = Bounds(rows=len(self._puzzle), cols=len(self._puzzle[0]))
        self.solution: List[List[str]] = []
        self.clear_solution()

    # ------------------------------------------------------------------
    # Initialization helpers
    # ------------------------------------------------------------------
    def _validate(self) -> None:
        if len(self.config.blank) != 1:
            raise GridDimensionError(f"Blank value must be a single character, got {self.config.blank!r}")
        n = len(self._puzzle)
        m = len(self._puzzle[0]) if n else 0
        if not self.config.accepts(n, m):
            LOGGER.error(
                "Rejecting %sx%s grid; supported extent is 1..%s x 1..%s",
                n,
                m,
                self.config.max_rows,
                self.config.max_cols,
            )
            raise GridDimensionError(
                f"Grid of {n}x{m} outside supported extent "
                f"{self.config.max_rows}x{self.config.max_cols}"
            )
        for r, row in enumerate(self._puzzle):
            if len(row) != m:
                raise GridDimensionError(f"Row {r} has {len(row)} cells; expected {m}")
            for c, char in enumerate(row):
                if not isinstance(char, str) or len(char) != 1:
                    raise GridDimensionError(f"Cell ({r},{c}) must be a single character, got {char!r}")

    def clear_solution(self) -> None:
        self.solution = [[self.config.blank] * self.cols for _ in range(self.rows)]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def puzzle_at(self, row: int, col: int) -> str:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.rows}x{self.cols} grid")
        return self._puzzle[row][col]

    def solution_at(self, row: int, col: int) -> str:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.rows}x{self.cols} grid")
        return self.solution[row][col]

    def write_solution(self, row: int, col: int, char: str) -> None:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.rows}x{self.cols} grid")
        self.solution[row][col] = char

    def puzzle_rows(self) -> List[List[str]]:
        return [list(row) for row in self._puzzle]

    def solution_rows(self) -> List[List[str]]:
        return [list(row) for row in self.solution]

    # ------------------------------------------------------------------
    # Line views
    # ------------------------------------------------------------------
    def row_view(self, row: int) -> LineView:
        return LineView(self, (row, 0), LineDirection.HORIZONTAL.step, self.cols)

    def column_view(self, col: int) -> LineView:
        return LineView(self, (0, col), LineDirection.VERTICAL.step, self.rows)

    def line_view(self, origin: Tuple[int, int], direction: LineDirection, length: int) -> LineView:
        """Build a view after checking that every cell lies inside the grid."""

        view = LineView(self, origin, direction.step, length)
        if length > 0:
            first, last = view.cell(0), view.cell(length - 1)
            if not (self.bounds.contains(*first) and self.bounds.contains(*last)):
                raise IndexError(
                    f"{direction.value} line from {origin} of length {length} leaves the grid"
                )
        return view

    def to_jsonable(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "puzzle": ["".join(row) for row in self._puzzle],
            "solution": ["".join(row) for row in self.solution],
        }
