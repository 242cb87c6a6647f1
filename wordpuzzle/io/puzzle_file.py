"""Loaders for the puzzle grid and the word list."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import GridDimensionError, PuzzleLoadError, WordListLoadError
from ..data.normalization import clean_word
from ..engine.grid import GridConfig, PuzzleGrid
from ..utils.logger import get_logger
from .sources import read_text

LOGGER = get_logger(__name__)


def parse_puzzle(text: str) -> List[List[str]]:
    """Split puzzle text into rows of single-character cells.

    Rows are usually written with cells separated by spaces (``"A B C"``);
    a row given as one contiguous token (``"ABC"``) is split per character.
    Blank lines are ignored.
    """

    rows: List[List[str]] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        tokens = raw.split()
        if not tokens:
            continue
        if len(tokens) == 1:
            row = list(tokens[0])
        else:
            row = tokens
        for token in row:
            if len(token) != 1:
                raise PuzzleLoadError(f"Line {line_no}: cell {token!r} is not a single character")
        rows.append(row)
    if not rows:
        raise PuzzleLoadError("Puzzle contains no rows")
    return rows


def load_puzzle(location: Path | str, config: GridConfig | None = None) -> PuzzleGrid:
    try:
        text = read_text(location)
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleLoadError(f"Cannot read puzzle {location}: {exc}") from exc
    rows = parse_puzzle(text)
    try:
        grid = PuzzleGrid(rows, config)
    except GridDimensionError as exc:
        raise PuzzleLoadError(f"Invalid puzzle {location}: {exc}") from exc
    LOGGER.info("Loaded %sx%s puzzle from %s", grid.rows, grid.cols, location)
    return grid


def parse_words(text: str) -> List[str]:
    """Read words, one entry per line. Blank lines and # comments are skipped."""

    words: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        word = clean_word(line)
        if word:
            words.append(word)
    return words


def load_words(location: Path | str) -> List[str]:
    try:
        text = read_text(location)
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Cannot read word list {location}: {exc}") from exc
    words = parse_words(text)
    LOGGER.info("Loaded %d words from %s", len(words), location)
    return words
