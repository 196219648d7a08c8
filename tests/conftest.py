"""Shared fixtures: a known puzzle and its solution."""

import pytest

from sudoku_game.core.board import SudokuGrid
from sudoku_game.session import GameSession


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
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

# The solution to the test puzzle
TEST_SOLUTION = (
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


@pytest.fixture
def puzzle_string():
    return TEST_PUZZLE


@pytest.fixture
def solution_string():
    return TEST_SOLUTION


@pytest.fixture
def puzzle():
    return SudokuGrid.from_string(TEST_PUZZLE)


@pytest.fixture
def solution():
    return SudokuGrid.from_string(TEST_SOLUTION)


@pytest.fixture
def session(puzzle, solution):
    """A session on the known puzzle with a seeded random source."""
    return GameSession.from_grids(puzzle, solution, seed=42)
