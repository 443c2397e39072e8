"""Console rendering of Sudoku boards."""

from __future__ import annotations
from typing import Optional
from rich.text import Text

from ..core.board import SudokuBoard, GRID_SIZE, BOX_SIZE

SHADED = "grey50"
UNSHADED = "white"


def render_compact(board: SudokuBoard) -> str:
    """Dotted grid with a frame around every 3x3 box."""
    lines = []
    horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

    for y in range(GRID_SIZE):
        if y % BOX_SIZE == 0:
            lines.append(horizontal_sep)

        row_str = '|'
        for x in range(GRID_SIZE):
            val = board.get(x, y)
            row_str += ' .' if val == 0 else f' {val}'

            if (x + 1) % BOX_SIZE == 0:
                row_str += ' |'

        lines.append(row_str)

    lines.append(horizontal_sep)
    return '\n'.join(lines)


def render_plain(board: SudokuBoard) -> str:
    """ASCII grid with a frame around every cell, blanks for empty cells."""
    separator = '+' + '---+' * GRID_SIZE
    lines = [separator]
    for row in board.rows():
        lines.append('|' + ''.join(f' {val or " "} |' for val in row))
        lines.append(separator)
    return '\n'.join(lines)


def render_fancy(board: SudokuBoard, original: Optional[SudokuBoard] = None) -> Text:
    """
    Box-drawing grid for a rich console.

    Alternate 3x3 boxes are shaded grey and white. Cells that hold a clue
    in ``original`` are drawn bold.
    """
    text = Text()
    text.append('┌' + '───┬' * (GRID_SIZE - 1) + '───┐\n')

    for y in range(GRID_SIZE):
        text.append('│')
        for x in range(GRID_SIZE):
            val = board.get(x, y)
            style = SHADED if (x // BOX_SIZE + y // BOX_SIZE) % 2 else UNSHADED
            if original is not None and original.get(x, y):
                style = f'bold {style}'
            text.append(f' {val or " "} ', style=style)
            text.append('│')
        text.append('\n')

        if y == GRID_SIZE - 1:
            text.append('└' + '───┴' * (GRID_SIZE - 1) + '───┘')
        else:
            text.append('├' + '───┼' * (GRID_SIZE - 1) + '───┤\n')

    return text
