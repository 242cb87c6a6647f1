"""Pretty-print helpers for puzzle and solution grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from ..core.constants import Orientation

if TYPE_CHECKING:
    from ..core.models import WordResult
    from ..engine.grid import PuzzleGrid


def format_grid(rows: Sequence[Sequence[str]], *, label: Optional[str] = None) -> str:
    """Render ``rows`` with space-separated cells under an optional header."""

    lines = []
    if label:
        n = len(rows)
        m = len(rows[0]) if n else 0
        lines.append(f"{label} ({n} x {m}):")
        lines.append("")
    for row in rows:
        lines.append(" ".join(row))
    return "\n".join(lines)


def format_result(result: WordResult) -> str:
    placement = result.placement
    if placement is None:
        return f"{result.word}: not found"
    (r1, c1), (r2, c2) = placement.start, placement.end
    reading = "reversed " if placement.orientation == Orientation.BACKWARD else ""
    return f"{result.word}: {r1}:{c1} -> {r2}:{c2} ({reading}{placement.direction.value.lower()})"


def pretty_print_puzzle(grid: PuzzleGrid, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(file=stream)
    print(format_grid(grid.puzzle_rows(), label="Puzzle array"), file=stream)
    print(file=stream)


def pretty_print_solution(
    grid: PuzzleGrid,
    results: Iterable[WordResult] = (),
    *,
    stream=None,
) -> None:
    """Print the per-word outcomes followed by the solution grid."""

    stream = stream or sys.stdout
    results = list(results)
    if results:
        for result in results:
            print(f"  {format_result(result)}", file=stream)
        found = sum(1 for result in results if result.found)
        print(f"  Found {found}/{len(results)} words", file=stream)
    print(file=stream)
    print(format_grid(grid.solution_rows(), label="Solution"), file=stream)
    print(file=stream)
