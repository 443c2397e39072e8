"""Tests for the Sudoku puzzle interface."""

import pytest
from sudokusolve import Sudoku, StructureError, OutOfBoundsError, InvalidValueError
from sudokusolve.core.board import SudokuBoard
from sudokusolve.core.validator import validate_solution


# Valid puzzle with eight completions
OPEN_PUZZLE = (
    "100060000"
    "980000605"
    "000005001"
    "000000304"
    "060000900"
    "040720000"
    "093076100"
    "006480007"
    "500902460"
)

# A known solvable puzzle (medium difficulty)
EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the easy puzzle
SOLVED_GRID = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Two 5s in the first row
CONFLICTING_PUZZLE = "550000000" + "0" * 72


def rows_of(s):
    return [[int(c) for c in s[i:i + 9]] for i in range(0, 81, 9)]


class TestSudoku:
    """Tests for the Sudoku facade."""

    def test_construct_from_rows(self):
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        assert puzzle.get(0, 0) == 1
        assert puzzle.get(4, 0) == 6
        assert puzzle.board() == rows_of(OPEN_PUZZLE)

    def test_eight_rows(self):
        """Scenario: a grid with 8 rows is rejected."""
        with pytest.raises(StructureError):
            Sudoku(rows_of(OPEN_PUZZLE)[:8])

    def test_bad_value(self):
        rows = rows_of(OPEN_PUZZLE)
        rows[0][1] = 10
        with pytest.raises(ValueError):
            Sudoku(rows)

    def test_open_puzzle(self):
        """Scenario: valid, unsolved, every completion enumerated."""
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        assert puzzle.valid
        assert not puzzle.solved

        solutions = puzzle.solve()
        plain = puzzle.solve(use_deduction_rules=False)

        assert len({s.to_string() for s in solutions}) == 8
        assert {s.to_string() for s in plain} == {s.to_string() for s in solutions}
        for solution in solutions:
            assert validate_solution(puzzle.original(), solution)
        assert puzzle.last_stats.solutions == 8

    def test_unique_puzzle(self):
        """Test a puzzle with one completion yields exactly that grid."""
        puzzle = Sudoku(rows_of(EASY_PUZZLE))

        solutions = puzzle.solve()

        assert len(solutions) == 1
        assert solutions[0].to_string() == SOLVED_GRID
        assert puzzle.last_stats.solutions == 1

    def test_conflicting_puzzle(self):
        """Scenario: two 5s in a row make the grid invalid and unsolvable."""
        puzzle = Sudoku(rows_of(CONFLICTING_PUZZLE))
        assert not puzzle.valid
        assert puzzle.solve() == []

    def test_solved_grid(self):
        """Scenario: a solved grid is its own only solution."""
        puzzle = Sudoku(rows_of(SOLVED_GRID))
        assert puzzle.solved

        solutions = puzzle.solve()

        assert len(solutions) == 1
        assert solutions[0].to_list() == rows_of(SOLVED_GRID)

    def test_empty_grid(self):
        """Scenario: an empty grid is valid, unsolved and has solutions."""
        puzzle = Sudoku([[0] * 9 for _ in range(9)])
        assert puzzle.valid
        assert not puzzle.solved

        solutions = puzzle.solve(limit=1)

        assert solutions
        assert solutions[0].is_solved()

    def test_solve_leaves_board_unchanged(self):
        """Test solving does not touch the visible grid."""
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        before = puzzle.board()
        puzzle.solve()
        assert puzzle.board() == before

    def test_board_is_a_copy(self):
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        cells = puzzle.board()
        cells[0][0] = 9
        assert puzzle.get(0, 0) == 1

    def test_edit(self):
        """Test set and clear go through to the grid."""
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        assert puzzle.candidates(1, 0) == [2, 3, 5, 7]

        puzzle.set(1, 0, 7)
        assert puzzle.get(1, 0) == 7
        assert puzzle.candidates(1, 0) == []
        assert puzzle.valid

        puzzle.set(1, 0, 1)  # clashes with (0, 0)
        assert not puzzle.valid

        puzzle.clear(1, 0)
        assert puzzle.get(1, 0) == 0
        assert puzzle.valid

        # Clues are remembered separately
        assert puzzle.original().to_string() == OPEN_PUZZLE

    @pytest.mark.parametrize("x, y", [(-1, 0), (9, 0), (0, -1), (0, 9)])
    def test_bounds(self, x, y):
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        with pytest.raises(OutOfBoundsError):
            puzzle.get(x, y)
        with pytest.raises(OutOfBoundsError):
            puzzle.set(x, y, 1)
        with pytest.raises(OutOfBoundsError):
            puzzle.candidates(x, y)

    @pytest.mark.parametrize("value", [-1, 10])
    def test_set_value_range(self, value):
        puzzle = Sudoku(rows_of(OPEN_PUZZLE))
        with pytest.raises(InvalidValueError):
            puzzle.set(1, 0, value)

    def test_from_text(self):
        text = "\n".join(OPEN_PUZZLE[i:i + 9] for i in range(0, 81, 9))
        puzzle = Sudoku.from_text(text)
        assert puzzle.board() == rows_of(OPEN_PUZZLE)

    def test_from_file(self, tmp_path):
        path = tmp_path / "puzzle.txt"
        path.write_text("\n".join(SOLVED_GRID[i:i + 9] for i in range(0, 81, 9)))
        puzzle = Sudoku.from_file(str(path))
        assert puzzle.solved

    def test_from_board(self):
        board = SudokuBoard.from_string(OPEN_PUZZLE)
        puzzle = Sudoku(board)
        board.set(1, 0, 7)
        assert puzzle.get(1, 0) == 0

    def test_str(self):
        puzzle = Sudoku(rows_of(SOLVED_GRID))
        assert str(puzzle).splitlines()[1].startswith("| 5 | 3 | 4 |")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
