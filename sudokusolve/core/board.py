"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Tuple, Optional, Set, Sequence, Union

from .errors import StructureError, InvalidValueError, OutOfBoundsError
from .validator import is_unique

GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, GRID_SIZE + 1)

GridLike = Union["SudokuBoard", np.ndarray, Sequence[Sequence[int]]]


def box_index(x: int, y: int) -> int:
    """Get the box index (0-8, row-major) of the box containing (x, y)."""
    return (y // BOX_SIZE) * BOX_SIZE + (x // BOX_SIZE)


def box_origin(k: int) -> Tuple[int, int]:
    """Get the (x, y) of the top-left cell of box k."""
    return (k % BOX_SIZE) * BOX_SIZE, (k // BOX_SIZE) * BOX_SIZE


def box_cells(k: int) -> List[Tuple[int, int]]:
    """Get the (x, y) coordinates of box k in row-major order."""
    x0, y0 = box_origin(k)
    return [(x0 + j, y0 + i) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]


def _is_index(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells are addressed as (x, y): x is the column, y is the row, both 0-8.
    A value of 0 marks an empty cell. Row, column and box views are computed
    from the live cell store on every call and returned as fresh lists.
    """

    def __init__(self, grid: Optional[GridLike] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid (nested sequences, numpy array or
                  another board). If None, creates an empty board.

        Raises:
            StructureError: The grid is not exactly 9x9.
            InvalidValueError: A cell is not an integer in 0-9.
        """
        if grid is None:
            self._cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)
        elif isinstance(grid, SudokuBoard):
            self._cells = grid._cells.copy()
        else:
            self._cells = self._coerce_grid(grid)

    @staticmethod
    def _coerce_grid(grid: Union[np.ndarray, Sequence[Sequence[int]]]) -> np.ndarray:
        try:
            shape_ok = len(grid) == GRID_SIZE and all(len(row) == GRID_SIZE for row in grid)
        except TypeError:
            shape_ok = False
        if not shape_ok:
            raise StructureError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")

        arr = np.array(grid)
        if arr.shape != (GRID_SIZE, GRID_SIZE):
            raise StructureError(
                f"Grid shape must be ({GRID_SIZE}, {GRID_SIZE}), got {arr.shape}"
            )
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidValueError(f"Cell values must be integers, got dtype {arr.dtype}")

        bad = np.argwhere((arr < 0) | (arr > GRID_SIZE))
        if len(bad):
            y, x = bad[0]
            raise InvalidValueError(
                f"Value at ({x}, {y}) must be 0-{GRID_SIZE}, got {arr[y, x]}"
            )
        return arr.astype(np.int32)

    @staticmethod
    def _check_position(x: int, y: int) -> None:
        if not (_is_index(x) and _is_index(y)
                and 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise OutOfBoundsError(f"Position ({x}, {y}) is outside the 9x9 grid")

    @staticmethod
    def _check_index(index: int, what: str) -> None:
        if not (_is_index(index) and 0 <= index < GRID_SIZE):
            raise OutOfBoundsError(f"{what} index must be 0-{GRID_SIZE - 1}, got {index}")

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board._cells = self._cells.copy()
        return new_board

    def get(self, x: int, y: int) -> int:
        """Get value at column x, row y. 0 means empty."""
        self._check_position(x, y)
        return int(self._cells[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        """Set value at column x, row y. Use 0 to clear."""
        self._check_position(x, y)
        if not _is_index(value) or value < 0 or value > GRID_SIZE:
            raise InvalidValueError(f"Value must be 0-{GRID_SIZE}, got {value}")
        self._cells[y, x] = value

    def clear(self, x: int, y: int) -> None:
        """Clear the cell at column x, row y."""
        self._check_position(x, y)
        self._cells[y, x] = 0

    def is_empty(self, x: int, y: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(x, y) == 0

    def row(self, y: int) -> List[int]:
        """Get all values in row y."""
        self._check_index(y, "Row")
        return self._cells[y, :].tolist()

    def column(self, x: int) -> List[int]:
        """Get all values in column x."""
        self._check_index(x, "Column")
        return self._cells[:, x].tolist()

    def box(self, k: int) -> List[int]:
        """Get all values in box k (0-8, counted row-major), read row-major."""
        self._check_index(k, "Box")
        x0, y0 = box_origin(k)
        return self._cells[y0:y0 + BOX_SIZE, x0:x0 + BOX_SIZE].ravel().tolist()

    def rows(self) -> Iterator[List[int]]:
        return (self.row(y) for y in range(GRID_SIZE))

    def columns(self) -> Iterator[List[int]]:
        return (self.column(x) for x in range(GRID_SIZE))

    def boxes(self) -> Iterator[List[int]]:
        return (self.box(k) for k in range(GRID_SIZE))

    def groups(self) -> Iterator[List[int]]:
        """Yield all 27 groups: the rows, then the columns, then the boxes."""
        yield from self.rows()
        yield from self.columns()
        yield from self.boxes()

    def get_candidates(self, x: int, y: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of values (1-9) that can be placed at (x, y) without
            repeating a value of its row, column or box. Returns an empty
            set if the cell is already filled.
        """
        self._check_position(x, y)
        if self._cells[y, x] != 0:
            return set()

        used = set(self._cells[y, :].tolist())
        used.update(self._cells[:, x].tolist())
        x0 = (x // BOX_SIZE) * BOX_SIZE
        y0 = (y // BOX_SIZE) * BOX_SIZE
        used.update(self._cells[y0:y0 + BOX_SIZE, x0:x0 + BOX_SIZE].ravel().tolist())

        return set(DIGITS).difference(used)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cell positions as (x, y), scanning rows top to bottom."""
        return [(int(x), int(y)) for y, x in np.argwhere(self._cells == 0)]

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """Get the first empty cell in row-major order, or None."""
        empty = np.argwhere(self._cells == 0)
        if len(empty) == 0:
            return None
        y, x = empty[0]
        return int(x), int(y)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self._cells == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self._cells != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        return all(is_unique(group) for group in self.groups())

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Return the cell values as an independent list of rows."""
        return self._cells.tolist()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self._cells.ravel().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters read row by row.
               0 or . for empty, 1-9 for values.
        """
        if len(s) != GRID_SIZE * GRID_SIZE:
            raise StructureError(
                f"String length must be {GRID_SIZE * GRID_SIZE}, got {len(s)}"
            )

        grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '.':
                continue
            if c not in "0123456789":
                raise InvalidValueError(f"Unexpected character {c!r} at position {idx}")
            grid[idx // GRID_SIZE, idx % GRID_SIZE] = int(c)

        return cls(grid)

    def __str__(self) -> str:
        """Pretty-print the board."""
        from ..formats.renderer import render_compact
        return render_compact(self)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self.to_string())
