import unittest

from wordpuzzle.core.constants import LineDirection
from wordpuzzle.core.exceptions import GridDimensionError
from wordpuzzle.engine.grid import GridConfig, PuzzleGrid


class GridConfigTests(unittest.TestCase):
    def test_accepts_within_extent(self) -> None:
        config = GridConfig(max_rows=3, max_cols=4)
        self.assertTrue(config.accepts(3, 4))
        self.assertTrue(config.accepts(1, 1))
        self.assertFalse(config.accepts(4, 4))
        self.assertFalse(config.accepts(3, 5))
        self.assertFalse(config.accepts(0, 2))


class PuzzleGridTests(unittest.TestCase):
    def test_solution_starts_blank(self) -> None:
        grid = PuzzleGrid(["ABC", "DEF"])
        self.assertEqual((grid.rows, grid.cols), (2, 3))
        self.assertEqual(grid.solution_rows(), [[" "] * 3, [" "] * 3])

    def test_custom_blank(self) -> None:
        grid = PuzzleGrid(["AB"], GridConfig(blank="."))
        self.assertEqual(grid.solution_rows(), [[".", "."]])

    def test_rejects_oversized_grid(self) -> None:
        with self.assertRaises(GridDimensionError):
            PuzzleGrid(["AB", "CD", "EF"], GridConfig(max_rows=2))
        with self.assertRaises(GridDimensionError):
            PuzzleGrid(["A" * 51])

    def test_rejects_empty_and_ragged_grids(self) -> None:
        with self.assertRaises(GridDimensionError):
            PuzzleGrid([])
        with self.assertRaises(GridDimensionError):
            PuzzleGrid([""])
        with self.assertRaises(GridDimensionError):
            PuzzleGrid(["ABC", "DE"])

    def test_rejects_multi_character_cells(self) -> None:
        with self.assertRaises(GridDimensionError):
            PuzzleGrid([["A", "BC"], ["D", "E"]])

    def test_puzzle_rows_are_copies(self) -> None:
        grid = PuzzleGrid(["AB", "CD"])
        rows = grid.puzzle_rows()
        rows[0][0] = "Z"
        self.assertEqual(grid.puzzle_at(0, 0), "A")

    def test_write_and_clear_solution(self) -> None:
        grid = PuzzleGrid(["AB", "CD"])
        grid.write_solution(1, 0, "C")
        self.assertEqual(grid.solution_at(1, 0), "C")
        grid.clear_solution()
        self.assertEqual(grid.solution_at(1, 0), " ")
        with self.assertRaises(IndexError):
            grid.write_solution(2, 0, "X")

    def test_row_and_column_views(self) -> None:
        grid = PuzzleGrid(["ABC", "DEF"])
        self.assertEqual(grid.row_view(1).text(), "DEF")
        self.assertEqual(grid.column_view(2).text(), "CF")
        self.assertEqual(grid.column_view(2).cells(), [(0, 2), (1, 2)])

    def test_line_view_bounds_checked(self) -> None:
        grid = PuzzleGrid(["ABC", "DEF"])
        view = grid.line_view((0, 2), LineDirection.SOUTH_WEST, 2)
        self.assertEqual(view.text(), "CE")
        with self.assertRaises(IndexError):
            view[2]
        with self.assertRaises(IndexError):
            grid.line_view((0, 1), LineDirection.SOUTH_EAST, 3)

    def test_to_jsonable(self) -> None:
        grid = PuzzleGrid(["AB"])
        grid.write_solution(0, 1, "B")
        self.assertEqual(
            grid.to_jsonable(),
            {"rows": 1, "cols": 2, "puzzle": ["AB"], "solution": [" B"]},
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
