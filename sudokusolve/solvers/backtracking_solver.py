"""Backtracking solver with constraint propagation and an undo log."""

from __future__ import annotations
from typing import Optional, List
from tqdm import tqdm

from .base_solver import BaseSolver
from .rules import apply_rules
from ..core.board import SudokuBoard


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search that enumerates every solution of a puzzle.

    Features:
    - Next open cell chosen in row-major order, candidates tried ascending
    - Four deduction rules (naked singles, row/column/box hidden singles)
      run from the pivot before every guess
    - A single working board, restored after each trial from an undo log
      instead of being copied per branch
    - Optional solution limit for early termination
    """

    name = "Backtracking+Deduction"

    def __init__(
        self,
        limit: Optional[int] = None,
        use_deduction_rules: bool = True,
        show_progress: bool = False,
        track_memory: bool = False,
    ):
        """
        Initialize the solver.

        Args:
            limit: Stop starting new trials once this many solutions have
                   been found. None enumerates every solution.
            use_deduction_rules: If True, run the deduction rules before
                                 each guess.
            show_progress: If True, display a tqdm bar over search nodes.
            track_memory: If True, record peak memory usage.
        """
        super().__init__(track_memory=track_memory)
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.limit = limit
        self.use_deduction_rules = use_deduction_rules
        self.show_progress = show_progress
        self._solutions: List[SudokuBoard] = []
        self._progress: Optional[tqdm] = None

    def _solve(self, board: SudokuBoard) -> List[SudokuBoard]:
        """Enumerate solutions on the working board."""
        self._solutions = []

        if not board.is_valid():
            return []

        with tqdm(desc="Searching", unit=" nodes", leave=False,
                  disable=not self.show_progress) as progress:
            self._progress = progress
            try:
                self._search(board)
            finally:
                self._progress = None

        return self._solutions

    def _limit_reached(self) -> bool:
        return self.limit is not None and len(self._solutions) >= self.limit

    def _search(self, board: SudokuBoard) -> None:
        """
        One recursive step of the search.

        On return the board holds exactly what it held on entry: every trial
        clears the cells it wrote before the next one starts.
        """
        self.stats.iterations += 1
        self._progress.update(1)

        if not board.is_valid():
            # Dead branch, usually a rule fill clashing with the guess
            self.stats.backtracks += 1
            return

        if board.is_complete():
            self._solutions.append(board.copy())
            self._progress.set_postfix(solutions=len(self._solutions))
            return

        cell = board.find_empty()
        if cell is None:
            return
        x, y = cell

        for value in sorted(board.get_candidates(x, y)):
            if self._limit_reached():
                break
            self.stats.nodes_explored += 1

            undo_log = [(x, y)]
            if self.use_deduction_rules:
                undo_log.extend(apply_rules(board, x, y))
            board.set(x, y, value)

            self._search(board)

            for cx, cy in undo_log:
                board.clear(cx, cy)
