"""Reading puzzles from text and files."""

from __future__ import annotations
import re
from typing import List

from ..core.board import SudokuBoard, GRID_SIZE

_IGNORED = re.compile(r"[^0-9\n]")


def parse_text(text: str) -> List[List[int]]:
    """
    Parse a puzzle written as nine lines of digits.

    ``.`` marks a blank cell and reads as 0. Any other character that is
    not a digit or a newline is dropped, so grids drawn with separators
    and indentation parse as well. Lines left empty are skipped. A single
    line of 81 digits is split into rows.

    The rows are returned as read; shape checks happen when they are
    turned into a board.
    """
    cleaned = _IGNORED.sub("", text.replace(".", "0")).strip()
    lines = [line for line in cleaned.split("\n") if line]

    if len(lines) == 1 and len(lines[0]) == GRID_SIZE * GRID_SIZE:
        flat = lines[0]
        lines = [flat[i:i + GRID_SIZE] for i in range(0, len(flat), GRID_SIZE)]

    return [[int(c) for c in line] for line in lines]


def board_from_text(text: str) -> SudokuBoard:
    """Parse text into a board."""
    return SudokuBoard(parse_text(text))


def read_puzzle(path: str) -> SudokuBoard:
    """Read a puzzle file into a board."""
    with open(path, encoding="utf-8") as f:
        return board_from_text(f.read())
