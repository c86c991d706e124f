import unittest

from crossword_sat.core.constants import CellState, Direction
from crossword_sat.core.exceptions import MalformedGrid
from crossword_sat.engine.grid import parse_grid


class GridParserTests(unittest.TestCase):
    def test_parse_cells_and_dimensions(self) -> None:
        grid = parse_grid("....\n..#.\nA...")
        self.assertEqual((grid.rows, grid.cols), (3, 4))
        self.assertEqual(grid.cell(1, 2).state, CellState.BLOCK)
        self.assertEqual(grid.cell(2, 0).state, CellState.PREFILLED)
        self.assertEqual(grid.cell(2, 0).letter, "A")
        self.assertEqual(grid.cell(0, 0).state, CellState.BLANK)
        self.assertEqual(grid.to_text(), "....\n..#.\nA...")

    def test_slots_across_then_down(self) -> None:
        grid = parse_grid("....\n..#.\nA...")
        described = [(s.index, s.direction, s.start_row, s.start_col, s.length) for s in grid.slots]
        self.assertEqual(
            described,
            [
                (0, Direction.ACROSS, 0, 0, 4),
                (1, Direction.ACROSS, 1, 0, 2),
                (2, Direction.ACROSS, 2, 0, 4),
                (3, Direction.DOWN, 0, 0, 3),
                (4, Direction.DOWN, 0, 1, 3),
                (5, Direction.DOWN, 0, 3, 3),
            ],
        )
        self.assertEqual(grid.slots[5].cells, [(0, 3), (1, 3), (2, 3)])

    def test_single_cell_runs_are_not_slots(self) -> None:
        grid = parse_grid(".#.\n###\n.#.")
        self.assertEqual(grid.slots, [])
        self.assertEqual(len(list(grid.fillable_cells())), 4)

    def test_pattern_reports_prefilled_letters(self) -> None:
        grid = parse_grid("A.C")
        self.assertEqual(grid.pattern(grid.slots[0]), ["A", None, "C"])

    def test_trailing_newline_is_ignored(self) -> None:
        grid = parse_grid("..\n..\n")
        self.assertEqual((grid.rows, grid.cols), (2, 2))

    def test_unequal_rows_are_rejected(self) -> None:
        with self.assertRaises(MalformedGrid) as ctx:
            parse_grid("AB\nCDE")
        self.assertIn("row #1", str(ctx.exception))

    def test_invalid_character_is_rejected(self) -> None:
        with self.assertRaises(MalformedGrid) as ctx:
            parse_grid("ABC\n.#@")
        self.assertIn("'@'", str(ctx.exception))

    def test_lowercase_letters_are_rejected(self) -> None:
        with self.assertRaises(MalformedGrid):
            parse_grid("ab")

    def test_empty_grid_is_rejected(self) -> None:
        with self.assertRaises(MalformedGrid):
            parse_grid("")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
