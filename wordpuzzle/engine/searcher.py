"""Fingerprint-pruned search of a single line."""

from __future__ import annotations

from typing import Optional

from ..core.constants import Orientation
from ..core.models import LineView, Match
from .fingerprint import fingerprint, slide, word_fingerprint


class LineSearcher:
    """Finds the first window of a line that spells ``word`` in either direction.

    The word's fingerprint is computed once and reused for every line the
    solver hands in. A fingerprint hit is only a candidate: anagrams share
    the checksum, so each hit is confirmed character by character and the
    scan continues past a rejected candidate.
    """

    def __init__(self, word: str) -> None:
        self.word = word
        self.word_fp = word_fingerprint(word)

    def search(self, view: LineView) -> Optional[Match]:
        length = len(self.word)
        if length == 0 or length > len(view):
            return None

        last_start = len(view) - length
        window_fp = fingerprint(view, 0, length)
        for start in range(last_start + 1):
            if window_fp == self.word_fp:
                if self._matches_forward(view, start):
                    return Match(start, Orientation.FORWARD)
                if self._matches_backward(view, start):
                    return Match(start, Orientation.BACKWARD)
            if start < last_start:
                window_fp = slide(window_fp, view[start], view[start + length])
        return None

    def _matches_forward(self, view: LineView, start: int) -> bool:
        return all(view[start + k] == char for k, char in enumerate(self.word))

    def _matches_backward(self, view: LineView, start: int) -> bool:
        last = len(self.word) - 1
        return all(view[start + last - k] == char for k, char in enumerate(self.word))
