"""Word-search puzzle solver.

This package exposes the public API surface via:

- ``wordpuzzle.engine.grid.PuzzleGrid``: owns the puzzle and its solution.
- ``wordpuzzle.engine.solver.WordPuzzleSolver``: places words in the grid.
- ``wordpuzzle.io.puzzle_file`` helpers: load puzzles and word lists.
"""

from .engine.grid import GridConfig, PuzzleGrid
from .engine.solver import WordPuzzleSolver
from .io.puzzle_file import load_puzzle, load_words

__all__ = [
    "GridConfig",
    "PuzzleGrid",
    "WordPuzzleSolver",
    "load_puzzle",
    "load_words",
]

__version__ = "0.1.0"
