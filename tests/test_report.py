import io
import unittest

from wordpuzzle.engine.grid import PuzzleGrid
from wordpuzzle.engine.solver import WordPuzzleSolver
from wordpuzzle.io.report import build_report
from wordpuzzle.utils.pretty import format_grid, format_result, pretty_print_solution


class PrettyTests(unittest.TestCase):
    def test_format_grid_with_label(self) -> None:
        self.assertEqual(
            format_grid([["A", "B"], ["C", "D"]], label="Puzzle array"),
            "Puzzle array (2 x 2):\n\nA B\nC D",
        )
        self.assertEqual(format_grid([["A"]]), "A")

    def test_format_result(self) -> None:
        grid = PuzzleGrid(["XCBA", "QRST"])
        solver = WordPuzzleSolver(grid)
        found = solver.place_word("ABC")
        missing = solver.place_word("DOG")
        self.assertEqual(format_result(found), "ABC: 0:3 -> 0:1 (reversed horizontal)")
        self.assertEqual(format_result(missing), "DOG: not found")

    def test_pretty_print_solution(self) -> None:
        grid = PuzzleGrid(["CAT"])
        results = WordPuzzleSolver(grid).solve(["CAT"])
        stream = io.StringIO()
        pretty_print_solution(grid, results, stream=stream)
        output = stream.getvalue()
        self.assertIn("CAT: 0:0 -> 0:2 (horizontal)", output)
        self.assertIn("Found 1/1 words", output)
        self.assertIn("Solution (1 x 3):\n\nC A T", output)


class ReportTests(unittest.TestCase):
    def test_build_report(self) -> None:
        grid = PuzzleGrid(["AXY", "ZBW", "VUC"])
        results = WordPuzzleSolver(grid).solve(["ABC", "DOG"])
        report = build_report(grid, results)
        self.assertEqual(report["rows"], 3)
        self.assertEqual(report["solution"], ["A  ", " B ", "  C"])
        self.assertEqual(report["found_count"], 1)
        self.assertEqual(
            report["words"][0],
            {
                "word": "ABC",
                "fingerprint": 198,
                "found": True,
                "direction": "SOUTH_EAST",
                "orientation": "FORWARD",
                "start": [0, 0],
                "end": [2, 2],
                "cells": [[0, 0], [1, 1], [2, 2]],
            },
        )
        self.assertEqual(report["words"][1], {"word": "DOG", "fingerprint": 68 + 79 + 71, "found": False})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
