"""
Deduction rules used by the backtracking search before each guess.

Every rule is handed the cell the search is about to branch on (the pivot)
and only looks at cells, rows, columns or boxes from the pivot onwards;
earlier ones were already covered by shallower levels of the search. Rules
fill cells in place and return the (x, y) coordinates they filled so the
caller can undo them.

Each rule makes a single pass. It never guesses: a value is written only
when it is the one legal choice for a cell, or the one legal place for the
value inside a row, column or box.
"""

from __future__ import annotations
from typing import List, Tuple

from ..core.board import SudokuBoard, GRID_SIZE, box_index, box_cells

Cell = Tuple[int, int]


def fill_naked_singles(board: SudokuBoard, x: int, y: int) -> List[Cell]:
    """
    Rule 1: forward naked singles.

    Scans the cells after the pivot in row-major order and fills every cell
    that has exactly one candidate. Candidates are read from the live board,
    so a fill can unlock another single later in the same scan.
    """
    filled = []
    for row in range(y, GRID_SIZE):
        start = x + 1 if row == y else 0
        for col in range(start, GRID_SIZE):
            cell_candidates = board.get_candidates(col, row)
            if len(cell_candidates) == 1:
                board.set(col, row, cell_candidates.pop())
                filled.append((col, row))
    return filled


def fill_hidden_singles(board: SudokuBoard, cells: List[Cell]) -> List[Cell]:
    """
    Fill hidden singles within one group of cells.

    A cell is filled when exactly one of its candidates is a candidate of
    no other cell in the group.
    """
    group_candidates = [board.get_candidates(cx, cy) for cx, cy in cells]

    filled = []
    for index, (cx, cy) in enumerate(cells):
        own = group_candidates[index]
        if not own:
            continue
        others = set()
        for other_index, other in enumerate(group_candidates):
            if other_index != index:
                others |= other
        unique = own - others
        if len(unique) == 1:
            board.set(cx, cy, unique.pop())
            filled.append((cx, cy))
    return filled


def fill_row_hidden_singles(board: SudokuBoard, x: int, y: int) -> List[Cell]:
    """Rule 2: hidden singles in row y and every row below it."""
    filled = []
    for row in range(y, GRID_SIZE):
        filled.extend(fill_hidden_singles(board, [(col, row) for col in range(GRID_SIZE)]))
    return filled


def fill_column_hidden_singles(board: SudokuBoard, x: int, y: int) -> List[Cell]:
    """Rule 3: hidden singles in column x and every column right of it."""
    filled = []
    for col in range(x, GRID_SIZE):
        filled.extend(fill_hidden_singles(board, [(col, row) for row in range(GRID_SIZE)]))
    return filled


def fill_box_hidden_singles(board: SudokuBoard, x: int, y: int) -> List[Cell]:
    """Rule 4: hidden singles in the pivot's box and every later box."""
    filled = []
    for k in range(box_index(x, y), GRID_SIZE):
        filled.extend(fill_hidden_singles(board, box_cells(k)))
    return filled


RULES = (
    fill_naked_singles,
    fill_row_hidden_singles,
    fill_column_hidden_singles,
    fill_box_hidden_singles,
)


def apply_rules(board: SudokuBoard, x: int, y: int) -> List[Cell]:
    """
    Run the four rules once each, in order, from pivot (x, y).

    Returns:
        Every cell filled by any rule, in the order they were filled.
    """
    filled = []
    for rule in RULES:
        filled.extend(rule(board, x, y))
    return filled
