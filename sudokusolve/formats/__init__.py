"""Text input and console output for Sudoku boards."""

from .parser import parse_text, board_from_text, read_puzzle
from .renderer import render_compact, render_plain, render_fancy

__all__ = [
    "parse_text",
    "board_from_text",
    "read_puzzle",
    "render_compact",
    "render_plain",
    "render_fancy",
]
