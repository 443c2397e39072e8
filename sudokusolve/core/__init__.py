"""Core module for Sudoku board representation and validation."""

from .errors import SudokuError, StructureError, InvalidValueError, OutOfBoundsError
from .board import SudokuBoard, GRID_SIZE, BOX_SIZE
from .validator import (
    is_unique,
    is_valid_placement,
    is_valid_board,
    is_solved_board,
    candidates,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "GRID_SIZE",
    "BOX_SIZE",
    "SudokuError",
    "StructureError",
    "InvalidValueError",
    "OutOfBoundsError",
    "is_unique",
    "is_valid_placement",
    "is_valid_board",
    "is_solved_board",
    "candidates",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
]
