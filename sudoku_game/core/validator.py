"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import Dict, Sequence, Set, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuGrid

SIZE = 9
BOX_SIZE = 3
CELL_COUNT = SIZE * SIZE
DIGITS = range(1, SIZE + 1)


def is_valid(cells: Sequence[int], idx: int, num: int) -> bool:
    """
    Check whether num may sit at idx without repeating in its row, column or box.

    The cell itself is ignored, so this works both before and after placing
    the value.

    Args:
        cells: 81 cell values in row-major order (a SudokuGrid or a list).
        idx: Cell index (0 to 80).
        num: Value to check.

    Returns:
        True if no other cell sharing a unit with idx holds num.
    """
    row, col = divmod(idx, SIZE)
    box_row = row - row % BOX_SIZE
    box_col = col - col % BOX_SIZE

    for i in range(SIZE):
        if i != col and cells[row * SIZE + i] == num:
            return False
        if i != row and cells[i * SIZE + col] == num:
            return False
        peer = (box_row + i // BOX_SIZE) * SIZE + box_col + i % BOX_SIZE
        if peer != idx and cells[peer] == num:
            return False

    return True


def find_conflicts(cells: Sequence[int]) -> Set[int]:
    """
    Find every filled cell whose value repeats in its row, column or box.

    Always a full recomputation over the grid.
    """
    conflicts = set()
    for idx in range(CELL_COUNT):
        value = cells[idx]
        if value != 0 and not is_valid(cells, idx, value):
            conflicts.add(idx)
    return conflicts


def is_valid_grid(cells: Sequence[int]) -> bool:
    """Check that the grid has no conflicts. Empty cells are allowed."""
    return not find_conflicts(cells)


def is_solved(cells: Sequence[int]) -> bool:
    """Check that the grid is complete and has no conflicts."""
    return all(cells[i] != 0 for i in range(CELL_COUNT)) and is_valid_grid(cells)


def count_digit_usage(cells: Sequence[int], conflicts: Set[int]) -> Dict[int, int]:
    """
    Count placements of each digit, skipping conflicting cells.

    Args:
        cells: The live grid.
        conflicts: Indices currently in conflict.

    Returns:
        Mapping of digit (1 to 9) to number of non-conflicting placements.
    """
    counts = {digit: 0 for digit in DIGITS}
    for idx in range(CELL_COUNT):
        value = cells[idx]
        if value != 0 and idx not in conflicts:
            counts[int(value)] += 1
    return counts


def check_win(grid: SudokuGrid, solution: SudokuGrid) -> bool:
    """
    Decide whether a grid is a finished puzzle.

    A full grid wins when it matches the solution, or when every cell is
    locally valid (an alternate completion of a puzzle with several
    solutions).
    """
    if not grid.is_complete():
        return False
    if grid == solution:
        return True
    return all(is_valid(grid, idx, grid[idx]) for idx in range(CELL_COUNT))


def validate_solution(puzzle: SudokuGrid, solution: SudokuGrid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Returns:
        True if solution is complete, valid and keeps every clue of the puzzle.
    """
    for idx in range(CELL_COUNT):
        if puzzle[idx] != 0 and puzzle[idx] != solution[idx]:
            return False
    return is_solved(solution)
