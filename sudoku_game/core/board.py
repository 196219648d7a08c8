"""Flat 81-cell Sudoku grid representation."""

from __future__ import annotations
import numpy as np
from typing import Iterable, List, Optional, Set


class SudokuGrid:
    """
    A 9x9 Sudoku grid stored as a flat sequence of 81 cells.

    Cell index ``i`` maps to row ``i // 9`` and column ``i % 9``.
    A value of 0 means the cell is empty.
    """

    SIZE = 9
    BOX_SIZE = 3
    CELL_COUNT = 81

    def __init__(self, cells: Optional[Iterable[int]] = None):
        """
        Initialize a grid.

        Args:
            cells: Optional 81 values in row-major order. If None, creates an empty grid.
        """
        if cells is None:
            self.cells = np.zeros(self.CELL_COUNT, dtype=np.int32)
            return

        arr = np.asarray(list(cells), dtype=np.int32).reshape(-1)
        if arr.shape != (self.CELL_COUNT,):
            raise ValueError(f"Grid must have {self.CELL_COUNT} cells, got {arr.size}")
        if arr.min() < 0 or arr.max() > self.SIZE:
            raise ValueError(f"Cell values must be 0-{self.SIZE}")
        self.cells = arr.copy()

    @classmethod
    def check_index(cls, idx: int) -> None:
        """Raise ValueError if idx is not a cell index."""
        if not 0 <= idx < cls.CELL_COUNT:
            raise ValueError(f"Cell index must be 0-{cls.CELL_COUNT - 1}, got {idx}")

    @staticmethod
    def row_of(idx: int) -> int:
        return idx // SudokuGrid.SIZE

    @staticmethod
    def col_of(idx: int) -> int:
        return idx % SudokuGrid.SIZE

    @staticmethod
    def box_of(idx: int) -> int:
        """Get the box index (0 to 8) for a cell."""
        row, col = divmod(idx, SudokuGrid.SIZE)
        return (row // SudokuGrid.BOX_SIZE) * SudokuGrid.BOX_SIZE + col // SudokuGrid.BOX_SIZE

    @classmethod
    def peers(cls, idx: int) -> Set[int]:
        """
        Get all peer cell indices (those in same row, column, or box).

        Returns:
            Set of indices, excluding idx itself.
        """
        cls.check_index(idx)
        row, col = divmod(idx, cls.SIZE)
        box_row = row - row % cls.BOX_SIZE
        box_col = col - col % cls.BOX_SIZE

        peers = set()
        for i in range(cls.SIZE):
            peers.add(row * cls.SIZE + i)
            peers.add(i * cls.SIZE + col)
            peers.add((box_row + i // cls.BOX_SIZE) * cls.SIZE + box_col + i % cls.BOX_SIZE)

        peers.remove(idx)
        return peers

    def copy(self) -> SudokuGrid:
        """Create a deep copy of the grid."""
        new_grid = SudokuGrid()
        new_grid.cells = self.cells.copy()
        return new_grid

    def __getitem__(self, idx: int) -> int:
        return int(self.cells[idx])

    def __len__(self) -> int:
        return self.CELL_COUNT

    def set(self, idx: int, value: int) -> None:
        """Set value at a cell index. Use 0 to clear."""
        self.check_index(idx)
        if value < 0 or value > self.SIZE:
            raise ValueError(f"Value must be 0-{self.SIZE}, got {value}")
        self.cells[idx] = value

    def clear(self, idx: int) -> None:
        """Clear the cell at idx."""
        self.set(idx, 0)

    def is_empty(self, idx: int) -> bool:
        return self.cells[idx] == 0

    def empty_cells(self) -> List[int]:
        """Get the indices of all empty cells in ascending order."""
        return [int(i) for i in np.flatnonzero(self.cells == 0)]

    def count_empty(self) -> int:
        return int(np.sum(self.cells == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.cells != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def to_list(self) -> List[int]:
        return [int(v) for v in self.cells]

    def as_matrix(self) -> np.ndarray:
        """View the cells as a 9x9 array."""
        return self.cells.reshape(self.SIZE, self.SIZE)

    def to_string(self) -> str:
        """Convert grid to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.cells)

    @classmethod
    def from_string(cls, s: str) -> SudokuGrid:
        """
        Create a grid from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
               Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != cls.CELL_COUNT:
            raise ValueError(f"String length must be {cls.CELL_COUNT}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character {c!r}")
        return cls(values)

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.BOX_SIZE * 2 + 1)) + '+') * self.BOX_SIZE

        for i, row in enumerate(self.as_matrix()):
            if i % self.BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j, val in enumerate(row):
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % self.BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuGrid(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return False
        return np.array_equal(self.cells, other.cells)

    # Mutable
    __hash__ = None
