"""Additive fingerprints used to prune candidate windows."""

from __future__ import annotations

from ..core.models import LineView


def word_fingerprint(word: str) -> int:
    return sum(ord(char) for char in word)


def fingerprint(view: LineView, window_start: int, window_len: int) -> int:
    """Sum of the character codes of ``window_len`` cells of ``view`` from ``window_start``."""

    return sum(ord(view[index]) for index in range(window_start, window_start + window_len))


def slide(old_fp: int, leaving_char: str, entering_char: str) -> int:
    """Advance a fixed-length window's fingerprint by one cell."""

    return old_fp - ord(leaving_char) + ord(entering_char)


__all__ = ["fingerprint", "slide", "word_fingerprint"]
