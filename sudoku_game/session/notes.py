"""Per-cell candidate annotations."""

from __future__ import annotations
from typing import FrozenSet, Iterable, List, Set

from ..core.board import SudokuGrid


def check_candidate(digit: int) -> None:
    """Raise ValueError if digit cannot be a candidate."""
    if not 1 <= digit <= SudokuGrid.SIZE:
        raise ValueError(f"Candidate must be 1-{SudokuGrid.SIZE}, got {digit}")


class CandidateNotes:
    """
    Candidate digits marked by the player, one set per cell.

    Independent of the grid values: an entry may outlive the cell being
    filled, so callers clear it when placing a value.
    """

    def __init__(self):
        self._notes: List[Set[int]] = [set() for _ in range(SudokuGrid.CELL_COUNT)]

    def get(self, idx: int) -> FrozenSet[int]:
        return frozenset(self._notes[idx])

    def toggle(self, idx: int, digit: int) -> None:
        """Add digit to the cell's candidates, or remove it if present."""
        check_candidate(digit)
        self._notes[idx] ^= {digit}

    def clear(self, idx: int) -> None:
        self._notes[idx].clear()

    def discard_from_peers(self, idx: int, digit: int) -> None:
        """Remove digit from every cell sharing a row, column or box with idx."""
        for peer in SudokuGrid.peers(idx):
            self._notes[peer].discard(digit)

    def snapshot(self, idx: int) -> FrozenSet[int]:
        """Copy of the cell's candidates, safe to keep across edits."""
        return frozenset(self._notes[idx])

    def restore(self, idx: int, digits: Iterable[int]) -> None:
        digits = set(digits)
        for digit in digits:
            check_candidate(digit)
        self._notes[idx] = digits

    def reset(self) -> None:
        """Drop every annotation."""
        for cell in self._notes:
            cell.clear()

    def __len__(self) -> int:
        """Number of cells carrying at least one candidate."""
        return sum(1 for cell in self._notes if cell)
