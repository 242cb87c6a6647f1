"""Word list normalization helpers."""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def clean_word(text: str, *, upper: bool = False) -> str:
    """Return ``text`` with all whitespace removed.

    Puzzles are matched case-sensitively, so case is preserved unless
    ``upper`` is set.
    """

    if not text:
        return ""
    word = WHITESPACE_RE.sub("", text)
    return word.upper() if upper else word


__all__ = ["clean_word"]
