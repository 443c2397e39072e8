"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_unique(values: Sequence[int]) -> bool:
    """
    Check that the nonzero members of a group are pairwise distinct.

    Args:
        values: The values of one row, column or box. Zeros are ignored.

    Returns:
        True if no nonzero value appears twice.
    """
    filled = [v for v in values if v != 0]
    return len(filled) == len(set(filled))


def is_valid_placement(board: SudokuBoard, x: int, y: int, value: int) -> bool:
    """
    Check if placing a value at (x, y) is valid.

    Args:
        board: The Sudoku board.
        x: Column index.
        y: Row index.
        value: Value to check (1-9).

    Returns:
        True if the cell is empty and the value does not already appear in
        its row, column or box.
    """
    return value in board.get_candidates(x, y)


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if all 27 rows, columns and boxes hold distinct values.
    """
    return board.is_valid()


def is_solved_board(board: SudokuBoard) -> bool:
    """Check that the board is valid and has no empty cell."""
    return board.is_solved()


def candidates(board: SudokuBoard, x: int, y: int) -> List[int]:
    """Legal values for the cell at (x, y) in ascending order."""
    return sorted(board.get_candidates(x, y))


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Runs the backtracking search with a solution limit so that it stops
    as soon as ``limit`` solutions have been found.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    from ..solvers.backtracking_solver import BacktrackingSolver

    solutions, _ = BacktrackingSolver(limit=limit).solve(board)
    return len(solutions)


def has_unique_solution(board: SudokuBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        board: The puzzle board.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    # Check that solution respects original clues
    for y in range(9):
        for x in range(9):
            if not puzzle.is_empty(x, y):
                if puzzle.get(x, y) != solution.get(x, y):
                    return False

    # Check that solution is complete and valid
    return solution.is_solved()
