"""CLI entrypoint for the word-search puzzle solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wordpuzzle.core.constants import DEFAULT_PUZZLE_FILE, DEFAULT_WORDS_FILE, MAX_COLS, MAX_ROWS
from wordpuzzle.core.exceptions import WordPuzzleError
from wordpuzzle.engine.grid import GridConfig
from wordpuzzle.engine.solver import WordPuzzleSolver
from wordpuzzle.io.puzzle_file import load_puzzle, load_words
from wordpuzzle.io.report import build_report
from wordpuzzle.utils.logger import configure_logging, get_logger
from wordpuzzle.utils.pretty import pretty_print_puzzle, pretty_print_solution

LOGGER = get_logger("wordpuzzle.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find words in a word-search puzzle",
    )
    parser.add_argument(
        "--puzzle",
        type=str,
        default=DEFAULT_PUZZLE_FILE,
        help="Puzzle file or http(s) URL, one row per line with space-separated cells",
    )
    parser.add_argument(
        "--words",
        type=str,
        default=DEFAULT_WORDS_FILE,
        help="Word list file or http(s) URL, one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--max-rows", type=int, default=MAX_ROWS, help="Largest accepted row count")
    parser.add_argument("--max-cols", type=int, default=MAX_COLS, help="Largest accepted column count")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON report instead of the text grids",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.max_rows < 1 or args.max_cols < 1:
        parser.error("--max-rows and --max-cols must be positive")

    config = GridConfig(max_rows=args.max_rows, max_cols=args.max_cols)
    try:
        grid = load_puzzle(args.puzzle, config)
        words = load_words(args.words)
    except WordPuzzleError as exc:
        LOGGER.error("%s", exc)
        return 1

    if not args.json:
        pretty_print_puzzle(grid)

    solver = WordPuzzleSolver(grid)
    results = solver.solve(words)

    report = build_report(grid, results)
    output_text = json.dumps(report, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.json:
        print(output_text)
    else:
        pretty_print_solution(grid, results)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
