"""Data models supporting the word puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .constants import LineDirection, Orientation

if TYPE_CHECKING:
    from ..engine.grid import PuzzleGrid


Cell = Tuple[int, int]


@dataclass(frozen=True)
class LineView:
    """A strided run of puzzle cells: ``origin, origin + step, ...``.

    The view only stores coordinates; characters are always read from the
    owning grid, so rows, columns and diagonals share one representation.
    """

    grid: "PuzzleGrid" = field(repr=False, compare=False)
    origin: Cell
    step: Tuple[int, int]
    length: int

    def __len__(self) -> int:
        return self.length

    def cell(self, index: int) -> Cell:
        if not 0 <= index < self.length:
            raise IndexError(f"Line index {index} outside 0..{self.length - 1}")
        return (
            self.origin[0] + index * self.step[0],
            self.origin[1] + index * self.step[1],
        )

    def __getitem__(self, index: int) -> str:
        row, col = self.cell(index)
        return self.grid.puzzle_at(row, col)

    def __iter__(self) -> Iterator[str]:
        for index in range(self.length):
            yield self[index]

    def cells(self) -> List[Cell]:
        return [self.cell(index) for index in range(self.length)]

    def text(self) -> str:
        return "".join(self)


@dataclass(frozen=True)
class Match:
    """First matching window along a line."""

    start_index: int
    orientation: Orientation


@dataclass(frozen=True)
class Placement:
    """Where a word was found and which cells it occupies."""

    word: str
    direction: LineDirection
    view: LineView
    match: Match

    @property
    def cells(self) -> List[Cell]:
        """Grid cells in word order (first character first)."""
        window = [self.view.cell(self.match.start_index + k) for k in range(len(self.word))]
        if self.match.orientation == Orientation.BACKWARD:
            window.reverse()
        return window

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    @property
    def orientation(self) -> Orientation:
        return self.match.orientation


@dataclass
class WordResult:
    """Outcome of searching one word."""

    word: str
    fingerprint: int
    placement: Optional[Placement] = None

    @property
    def found(self) -> bool:
        return self.placement is not None
