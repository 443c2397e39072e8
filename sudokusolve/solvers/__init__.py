"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver
from .rules import (
    apply_rules,
    fill_naked_singles,
    fill_row_hidden_singles,
    fill_column_hidden_singles,
    fill_box_hidden_singles,
)

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "apply_rules",
    "fill_naked_singles",
    "fill_row_hidden_singles",
    "fill_column_hidden_singles",
    "fill_box_hidden_singles",
]
