"""Custom exception hierarchy for word puzzle solving."""


class WordPuzzleError(Exception):
    """Base exception for solver failures."""


class GridDimensionError(WordPuzzleError):
    """Raised when a grid is empty, ragged or larger than the configured extent."""


class PuzzleLoadError(WordPuzzleError):
    """Raised when the puzzle file cannot be read or parsed."""


class WordListLoadError(WordPuzzleError):
    """Raised when the word list cannot be read."""


class SourceFetchError(WordPuzzleError):
    """Raised when a remote puzzle or word list cannot be downloaded."""
