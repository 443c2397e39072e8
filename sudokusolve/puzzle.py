"""The Sudoku puzzle object used by readers, editors and renderers."""

from __future__ import annotations
from typing import List, Optional

from .core.board import SudokuBoard, GridLike
from .formats.parser import board_from_text, read_puzzle
from .formats.renderer import render_plain
from .solvers.backtracking_solver import BacktrackingSolver
from .solvers.base_solver import SolverStats


class Sudoku:
    """
    A puzzle: the clues it was created with plus a grid that can be edited.

    Example:
        >>> puzzle = Sudoku.from_text(text)
        >>> puzzle.valid, puzzle.solved
        (True, False)
        >>> solutions = puzzle.solve()
    """

    def __init__(self, grid: GridLike):
        """
        Args:
            grid: A 9x9 grid of integers 0-9 (0 for empty), a numpy array
                  or a SudokuBoard. The grid is copied.

        Raises:
            StructureError: The grid is not 9x9.
            InvalidValueError: A value lies outside 0-9.
        """
        self._board = SudokuBoard(grid)
        self._original = self._board.copy()
        self.last_stats: Optional[SolverStats] = None

    @classmethod
    def from_text(cls, text: str) -> Sudoku:
        """Create a puzzle from nine lines of digits."""
        return cls(board_from_text(text))

    @classmethod
    def from_file(cls, path: str) -> Sudoku:
        """Create a puzzle from a text file."""
        return cls(read_puzzle(path))

    def get(self, x: int, y: int) -> int:
        return self._board.get(x, y)

    def set(self, x: int, y: int, value: int) -> None:
        self._board.set(x, y, value)

    def clear(self, x: int, y: int) -> None:
        self._board.clear(x, y)

    def candidates(self, x: int, y: int) -> List[int]:
        """Legal values for (x, y) in ascending order; empty if filled."""
        return sorted(self._board.get_candidates(x, y))

    @property
    def valid(self) -> bool:
        """No row, column or box repeats a value."""
        return self._board.is_valid()

    @property
    def solved(self) -> bool:
        """Valid and completely filled."""
        return self._board.is_solved()

    def board(self) -> List[List[int]]:
        """Independent copy of the current cell values, one list per row."""
        return self._board.to_list()

    def original(self) -> SudokuBoard:
        """The clues the puzzle was created with."""
        return self._original.copy()

    def current(self) -> SudokuBoard:
        """A copy of the current grid."""
        return self._board.copy()

    def solve(
        self,
        limit: Optional[int] = None,
        use_deduction_rules: bool = True,
        show_progress: bool = False,
        track_memory: bool = False,
    ) -> List[SudokuBoard]:
        """
        Find the solutions of the current grid.

        The grid itself is left untouched. An invalid or unsolvable grid
        gives an empty list.

        Args:
            limit: Stop after this many solutions. None finds them all.
            use_deduction_rules: Propagate forced cells before each guess.
            show_progress: Display a progress bar while searching.
            track_memory: Record peak memory in ``last_stats``.
        """
        solver = BacktrackingSolver(
            limit=limit,
            use_deduction_rules=use_deduction_rules,
            show_progress=show_progress,
            track_memory=track_memory,
        )
        solutions, self.last_stats = solver.solve(self._board)
        return solutions

    def __str__(self) -> str:
        return render_plain(self._board)

    def __repr__(self) -> str:
        return f"Sudoku(filled={self._board.count_filled()}, valid={self.valid})"
