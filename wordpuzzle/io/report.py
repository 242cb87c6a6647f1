"""JSON-ready payloads describing a solved puzzle."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from ..core.models import WordResult
from ..engine.grid import PuzzleGrid


def serialize_result(result: WordResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "word": result.word,
        "fingerprint": result.fingerprint,
        "found": result.found,
    }
    placement = result.placement
    if placement is not None:
        payload.update(
            {
                "direction": placement.direction.value,
                "orientation": placement.orientation.value,
                "start": list(placement.start),
                "end": list(placement.end),
                "cells": [list(cell) for cell in placement.cells],
            }
        )
    return payload


def build_report(grid: PuzzleGrid, results: Iterable[WordResult]) -> Dict[str, Any]:
    results = list(results)
    payload = grid.to_jsonable()
    payload["words"] = [serialize_result(result) for result in results]
    payload["found_count"] = sum(1 for result in results if result.found)
    return payload
