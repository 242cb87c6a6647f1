"""Shared constants and enumerations for the word puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


MAX_ROWS = 50
MAX_COLS = 50
BLANK = " "

DEFAULT_PUZZLE_FILE = "wpuzzle.txt"
DEFAULT_WORDS_FILE = "words.txt"


class Orientation(str, Enum):
    """How a matched word reads relative to its line's step."""

    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"


class LineDirection(str, Enum):
    """Line families scanned by the solver, in search priority order."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    SOUTH_EAST = "SOUTH_EAST"
    SOUTH_WEST = "SOUTH_WEST"

    @property
    def step(self) -> Tuple[int, int]:
        return LINE_STEPS[self]


LINE_STEPS = {
    LineDirection.HORIZONTAL: (0, 1),
    LineDirection.VERTICAL: (1, 0),
    LineDirection.SOUTH_EAST: (1, 1),
    LineDirection.SOUTH_WEST: (1, -1),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
