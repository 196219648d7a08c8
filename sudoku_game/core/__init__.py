"""Core module for Sudoku grid representation and validation."""

from .board import SudokuGrid
from .validator import (
    is_valid,
    find_conflicts,
    is_valid_grid,
    is_solved,
    count_digit_usage,
    check_win,
    validate_solution,
)

__all__ = [
    "SudokuGrid",
    "is_valid",
    "find_conflicts",
    "is_valid_grid",
    "is_solved",
    "count_digit_usage",
    "check_win",
    "validate_solution",
]
