"""Exceptions raised by the Sudoku grid and its accessors."""


class SudokuError(Exception):
    """Base class for all sudokusolve errors."""


class StructureError(SudokuError, ValueError):
    """The grid is not exactly 9x9."""


class InvalidValueError(SudokuError, ValueError):
    """A cell value lies outside 0-9."""


class OutOfBoundsError(SudokuError, IndexError):
    """A coordinate lies outside 0-8."""
