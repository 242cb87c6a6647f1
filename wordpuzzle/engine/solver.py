"""Word placement over the four line families of a puzzle grid."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from ..core.constants import LineDirection
from ..core.models import LineView, Placement, WordResult
from ..utils.logger import get_logger
from .diagonals import diagonals
from .grid import PuzzleGrid
from .searcher import LineSearcher

LOGGER = get_logger(__name__)

SEARCH_ORDER = (
    LineDirection.HORIZONTAL,
    LineDirection.VERTICAL,
    LineDirection.SOUTH_EAST,
    LineDirection.SOUTH_WEST,
)


class WordPuzzleSolver:
    """Finds words in a :class:`PuzzleGrid` and records them in its solution.

    Directions are tried in a fixed order (horizontal, vertical, south-east,
    south-west) and lines within a direction in grid order; the first match
    wins. Backward matches along each line cover the four opposite reading
    directions.
    """

    def __init__(self, grid: PuzzleGrid) -> None:
        self.grid = grid

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def locate(self, word: str) -> Optional[Placement]:
        """Return the first placement of ``word`` without touching the solution."""

        return self._locate(LineSearcher(word))

    def place_word(self, word: str) -> WordResult:
        searcher = LineSearcher(word)
        placement = self._locate(searcher)
        if placement is not None:
            self.fill(placement)
        LOGGER.info(
            "Searching for '%12s', fingerprint == %6d %s",
            word,
            searcher.word_fp,
            "found" if placement is not None else "not found",
        )
        return WordResult(word=word, fingerprint=searcher.word_fp, placement=placement)

    def place(self, word: str) -> bool:
        return self.place_word(word).found

    def solve(self, words: Iterable[str]) -> List[WordResult]:
        """Clear the solution and place every word in order."""

        self.grid.clear_solution()
        results = [self.place_word(word) for word in words]
        found = sum(1 for result in results if result.found)
        LOGGER.info("Placed %d of %d words", found, len(results))
        return results

    def fill(self, placement: Placement) -> None:
        """Copy the placed word into the solution grid, overwriting earlier fills."""

        for (row, col), char in zip(placement.cells, placement.word):
            self.grid.write_solution(row, col, char)

    # ------------------------------------------------------------------
    # Search helpers
    # ------------------------------------------------------------------
    def _locate(self, searcher: LineSearcher) -> Optional[Placement]:
        if not searcher.word:
            LOGGER.debug("Skipping empty word")
            return None
        for direction in SEARCH_ORDER:
            for view in self._lines(direction, len(searcher.word)):
                match = searcher.search(view)
                if match is None:
                    continue
                LOGGER.debug(
                    "'%s' matched %s %s at %s index %d",
                    searcher.word,
                    direction.value,
                    match.orientation.value,
                    view.origin,
                    match.start_index,
                )
                return Placement(word=searcher.word, direction=direction, view=view, match=match)
        return None

    def _lines(self, direction: LineDirection, word_length: int) -> Iterator[LineView]:
        if direction == LineDirection.HORIZONTAL:
            if word_length <= self.grid.cols:
                for row in range(self.grid.rows):
                    yield self.grid.row_view(row)
        elif direction == LineDirection.VERTICAL:
            if word_length <= self.grid.rows:
                for col in range(self.grid.cols):
                    yield self.grid.column_view(col)
        else:
            yield from diagonals(self.grid, direction, min_length=word_length)
