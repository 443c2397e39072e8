"""Sudoku solver: backtracking search with constraint propagation."""

from .core import (
    SudokuBoard,
    SudokuError,
    StructureError,
    InvalidValueError,
    OutOfBoundsError,
)
from .solvers import BacktrackingSolver, SolverStats
from .puzzle import Sudoku

__version__ = "1.0.0"

__all__ = [
    "Sudoku",
    "SudokuBoard",
    "BacktrackingSolver",
    "SolverStats",
    "SudokuError",
    "StructureError",
    "InvalidValueError",
    "OutOfBoundsError",
]
