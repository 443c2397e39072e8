"""Shared board fixtures for the test suite."""

import pytest
from sudokusolve.core.board import SudokuBoard


@pytest.fixture
def open_board():
    """A valid puzzle with eight completions."""
    return SudokuBoard.from_string(
        "100060000"
        "980000605"
        "000005001"
        "000000304"
        "060000900"
        "040720000"
        "093076100"
        "006480007"
        "500902460"
    )


@pytest.fixture
def easy_board():
    """A known puzzle with exactly one solution."""
    return SudokuBoard.from_string(
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    )


@pytest.fixture
def solved_board():
    return SudokuBoard.from_string(
        "534678912"
        "672195348"
        "198342567"
        "859761423"
        "426853791"
        "713924856"
        "961537284"
        "287419635"
        "345286179"
    )
