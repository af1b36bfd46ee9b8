import unittest
from pathlib import Path

from fillin.core.exceptions import SearchTimeoutError, SlotCountMismatchError
from fillin.engine.cp_solver import enumerate_solutions_cpsat
from fillin.engine.grid import FillInGrid
from fillin.engine.solver import solve_puzzle
from fillin.io.parser import load_puzzle

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


def row_set(solutions):
    return {tuple(solution.to_rows()) for solution in solutions}


class CpSatCrossCheckTests(unittest.TestCase):
    def test_two_by_two_block(self) -> None:
        grid = FillInGrid.from_rows(["11", "11"])
        solutions = enumerate_solutions_cpsat(grid, ["AT", "OX", "AO", "TX"])
        self.assertEqual(row_set(solutions), {("AT", "OX"), ("AO", "TX")})

    def test_matches_backtracking(self) -> None:
        boards = [
            (["111", "101", "111"], ["CAT", "COT", "TOP", "TAP"]),
            (["111", "000", "111"], ["CAT", "DOG"]),
            (["11011", "11011"], ["AT", "OX", "AO", "TX", "GO", "NO", "GN", "OO"]),
        ]
        for rows, words in boards:
            with self.subTest(rows=rows):
                grid = FillInGrid.from_rows(rows)
                expected = row_set(solve_puzzle(grid, words))
                self.assertEqual(row_set(enumerate_solutions_cpsat(grid, words)), expected)

    def test_unsatisfiable_returns_empty(self) -> None:
        grid = FillInGrid.from_rows(["11", "11"])
        self.assertEqual(enumerate_solutions_cpsat(grid, ["AB", "CD", "EF", "GH"]), [])

    def test_count_mismatch_raises(self) -> None:
        grid = FillInGrid.from_rows(["111", "000", "111"])
        with self.assertRaises(SlotCountMismatchError):
            enumerate_solutions_cpsat(grid, ["CAT"])

    def test_time_limit_raises_instead_of_partial_result(self) -> None:
        grid, words = load_puzzle(PUZZLES / "sample_board.txt", PUZZLES / "sample_words.txt")
        with self.assertRaises(SearchTimeoutError) as ctx:
            enumerate_solutions_cpsat(grid, words, timeout=0.001)
        self.assertEqual(ctx.exception.timeout, 0.001)
        self.assertIn("time limit", str(ctx.exception))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
