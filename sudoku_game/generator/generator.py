"""Sudoku puzzle generator with configurable difficulty levels."""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..core.board import SudokuGrid
from ..core.validator import is_valid, find_conflicts


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def clue_floor(self) -> int:
        """Fewest clues a puzzle of this difficulty keeps."""
        floors = {
            Difficulty.EASY: 35,
            Difficulty.MEDIUM: 25,
            Difficulty.HARD: 17,
        }
        return floors[self]

    @property
    def clue_spread(self) -> int:
        return 5

    @property
    def clue_range(self) -> Tuple[int, int]:
        """Get the range of clues for this difficulty (min, max), inclusive."""
        return self.clue_floor, self.clue_floor + self.clue_spread


@dataclass
class GenerationStats:
    """Statistics from the last solver run."""
    iterations: int = 0
    backtracks: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iterations": self.iterations,
            "backtracks": self.backtracks,
        }


class SudokuGenerator:
    """
    Generator for Sudoku puzzles with various difficulty levels.

    Algorithm:
    1. Generate a complete valid Sudoku solution using randomized backtracking
    2. Erase random cells until the difficulty's clue count is reached

    Carving does not check that the puzzle has a unique solution.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to use instead of a freshly seeded one.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.stats = GenerationStats()

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> SudokuGrid:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Returns:
            A SudokuGrid with the puzzle (clues only, no solution).
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_batch(
        self, count: int, difficulty: Difficulty = Difficulty.MEDIUM
    ) -> List[Tuple[SudokuGrid, SudokuGrid]]:
        """
        Generate multiple puzzles of the same difficulty.

        Returns:
            List of (puzzle, solution) pairs.
        """
        return [self.generate_with_solution(difficulty) for _ in range(count)]

    def generate_with_solution(
        self, difficulty: Difficulty = Difficulty.MEDIUM
    ) -> Tuple[SudokuGrid, SudokuGrid]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) grids.
        """
        solution = self.solve()
        puzzle = self._carve(solution, difficulty)
        return puzzle, solution

    def solve(self, grid: Optional[SudokuGrid] = None) -> Optional[SudokuGrid]:
        """
        Fill a grid using randomized backtracking.

        Empty cells are visited in ascending index order; each one tries the
        digits 1-9 in a freshly shuffled order. The search keeps an explicit
        trail of untried candidates per visited cell instead of recursing.

        Args:
            grid: Partially filled grid to complete. If None, starts from an
                  empty grid, which always succeeds.

        Returns:
            The completed grid, or None if the givens conflict or no
            completion exists.
        """
        self.stats = GenerationStats()
        cells = [0] * SudokuGrid.CELL_COUNT if grid is None else grid.to_list()
        if find_conflicts(cells):
            return None

        empties = [idx for idx, value in enumerate(cells) if value == 0]
        trail: List[List[int]] = []
        depth = 0

        while depth < len(empties):
            self.stats.iterations += 1
            idx = empties[depth]

            if len(trail) == depth:
                order = list(range(1, SudokuGrid.SIZE + 1))
                self.rng.shuffle(order)
                trail.append(order)

            untried = trail[depth]
            cells[idx] = 0
            while untried:
                value = untried.pop()
                if is_valid(cells, idx, value):
                    cells[idx] = value
                    break

            if cells[idx] != 0:
                depth += 1
                continue

            # Dead end: drop this cell's choices and retry the previous cell
            trail.pop()
            self.stats.backtracks += 1
            if depth == 0:
                return None
            depth -= 1

        return SudokuGrid(cells)

    def _carve(self, solution: SudokuGrid, difficulty: Difficulty) -> SudokuGrid:
        """Erase random cells from a complete solution to create a puzzle."""
        puzzle = solution.copy()
        target_clues = difficulty.clue_floor + self.rng.randint(0, difficulty.clue_spread)
        remove_count = SudokuGrid.CELL_COUNT - target_clues

        while remove_count > 0:
            idx = self.rng.randrange(SudokuGrid.CELL_COUNT)
            if not puzzle.is_empty(idx):
                puzzle.clear(idx)
                remove_count -= 1

        return puzzle
