"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List
import time
import tracemalloc

from ..core.board import SudokuBoard


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    solutions: int = 0

    algorithm: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "solutions": self.solutions,
            "algorithm": self.algorithm,
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = False):
        """
        Args:
            track_memory: If True, record peak memory with tracemalloc.
                          Tracing slows the search down noticeably.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[List[SudokuBoard], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and optional memory tracking.

        The caller's board is never modified; the search runs on a copy.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solutions, stats). The list is empty when the puzzle
            is invalid or has no solution.
        """
        self.stats = SolverStats(algorithm=self.name)

        # Leave a trace started by the caller running
        owns_trace = self.track_memory and not tracemalloc.is_tracing()
        if owns_trace:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            solutions = self._solve(board.copy())
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                self.stats.memory_bytes = peak
            if owns_trace:
                tracemalloc.stop()

        self.stats.solutions = len(solutions)
        self.stats.solved = bool(solutions)
        return solutions, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> List[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved boards found, possibly empty.
        """
        pass
