"""Game session: the single owner of a puzzle's mutable state."""

from __future__ import annotations
import random
from typing import Callable, Dict, FrozenSet, List, Optional, Set

from ..core.board import SudokuGrid
from ..core.validator import (
    check_win,
    count_digit_usage,
    find_conflicts,
    is_solved,
)
from ..generator import Difficulty, SudokuGenerator
from .history import EditHistory, EditRecord
from .notes import CandidateNotes, check_candidate
from .snapshot import SessionSnapshot

Listener = Callable[[SessionSnapshot], None]


class GameSession:
    """
    A Sudoku game in progress.

    Owns the solution, the clue grid, the live grid, candidate notes, undo
    history and the derived conflict set and digit counts. Conflicts and
    counts are recomputed from the live grid after every value change.

    Invalid or vacuous requests (editing a clue, re-entering the current
    value, undoing with no history, hinting on a full grid) do nothing.
    Out-of-range indices and digits raise ValueError.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Create a session and generate its first puzzle.

        Args:
            difficulty: Difficulty of the first puzzle.
            seed: Random seed for reproducibility.
            rng: Random source shared by generation and hints.
        """
        self._setup(difficulty, seed, rng)
        self.new_game()

    @classmethod
    def from_grids(
        cls,
        initial: SudokuGrid,
        solution: SudokuGrid,
        difficulty: Difficulty = Difficulty.MEDIUM,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> GameSession:
        """
        Start a session on a known puzzle instead of a generated one.

        Args:
            difficulty: Difficulty used by later calls to new_game().

        Raises:
            ValueError: If solution is not a complete valid grid.
        """
        if not is_solved(solution):
            raise ValueError("Solution must be a complete grid without conflicts")
        session = cls.__new__(cls)
        session._setup(difficulty, seed, rng)
        session._start(initial, solution)
        return session

    def _setup(
        self,
        difficulty: Difficulty,
        seed: Optional[int],
        rng: Optional[random.Random],
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.generator = SudokuGenerator(rng=self.rng)
        self.difficulty = difficulty
        self.notes = CandidateNotes()
        self.history = EditHistory()
        self._listeners: List[Listener] = []

    def new_game(self, difficulty: Optional[Difficulty] = None) -> None:
        """Generate a fresh puzzle and reset all play state."""
        if difficulty is not None:
            self.difficulty = difficulty
        puzzle, solution = self.generator.generate_with_solution(self.difficulty)
        self._start(puzzle, solution)

    def _start(self, initial: SudokuGrid, solution: SudokuGrid) -> None:
        self.solution = solution.copy()
        self.initial = initial.copy()
        self.grid = initial.copy()
        self.notes.reset()
        self.history.clear()
        self.selected: Optional[int] = None
        self.note_mode = False
        self.paused = False
        self.elapsed_seconds = 0
        self.won = False
        self._refresh()
        self._publish()

    # -- derived state -------------------------------------------------

    def _refresh(self) -> None:
        self.conflicts: Set[int] = find_conflicts(self.grid)
        self.digit_counts: Dict[int, int] = count_digit_usage(self.grid, self.conflicts)

    @property
    def exhausted_digits(self) -> FrozenSet[int]:
        """Digits already placed nine times without conflict."""
        return frozenset(d for d, count in self.digit_counts.items() if count >= SudokuGrid.SIZE)

    def is_clue(self, idx: int) -> bool:
        SudokuGrid.check_index(idx)
        return self.initial[idx] != 0

    def candidates(self, idx: int) -> FrozenSet[int]:
        SudokuGrid.check_index(idx)
        return self.notes.get(idx)

    def incorrect_cells(self) -> List[int]:
        """Editable cells that differ from the solution, once the grid is full."""
        if not self.grid.is_complete():
            return []
        return [
            idx for idx in range(SudokuGrid.CELL_COUNT)
            if not self.is_clue(idx) and self.grid[idx] != self.solution[idx]
        ]

    # -- edits ---------------------------------------------------------

    def set_value(self, idx: int, value: int) -> bool:
        """
        Place value at idx (0 erases).

        Records the edit, clears the cell's candidates, retracts value from
        peer candidates, then recomputes conflicts, digit counts and the win
        state.

        Returns:
            True if the grid changed.
        """
        SudokuGrid.check_index(idx)
        if value < 0 or value > SudokuGrid.SIZE:
            raise ValueError(f"Value must be 0-{SudokuGrid.SIZE}, got {value}")
        if self.won or self.is_clue(idx):
            return False

        previous = self.grid[idx]
        if previous == value:
            return False

        self.history.push(EditRecord(
            index=idx,
            previous=previous,
            value=value,
            previous_candidates=self.notes.snapshot(idx),
        ))
        self.grid.set(idx, value)

        if value != 0:
            self.notes.clear(idx)
            self.notes.discard_from_peers(idx, value)

        self._refresh()
        self.won = check_win(self.grid, self.solution)
        self._publish()
        return True

    def toggle_candidate(self, idx: int, digit: int) -> bool:
        """Flip digit in the candidates of an empty editable cell."""
        SudokuGrid.check_index(idx)
        check_candidate(digit)
        if self.won or self.is_clue(idx) or self.grid[idx] != 0:
            return False
        self.notes.toggle(idx, digit)
        self._publish()
        return True

    def clear_candidates(self, idx: int) -> bool:
        SudokuGrid.check_index(idx)
        if self.won or self.is_clue(idx):
            return False
        self.notes.clear(idx)
        self._publish()
        return True

    def undo(self) -> bool:
        """
        Reverse the most recent value edit.

        Only the edited cell is restored; candidates retracted from its
        peers stay retracted.
        """
        if self.won:
            return False
        record = self.history.pop()
        if record is None:
            return False

        self.grid.set(record.index, record.previous)
        self.notes.restore(record.index, record.previous_candidates)
        self._refresh()
        self._publish()
        return True

    def hint(self) -> Optional[int]:
        """
        Fill one empty cell from the solution.

        Uses the selected cell when it is empty, otherwise a random empty cell.

        Returns:
            The filled index, or None if the grid has no empty cell.
        """
        if self.won:
            return None
        empty = self.grid.empty_cells()
        if not empty:
            return None

        if self.selected is not None and self.grid.is_empty(self.selected):
            target = self.selected
        else:
            target = self.rng.choice(empty)

        self.selected = target
        self.set_value(target, self.solution[target])
        return target

    # -- input intents -------------------------------------------------

    def select(self, idx: int) -> None:
        SudokuGrid.check_index(idx)
        if self.paused:
            return
        self.selected = idx
        self._publish()

    def move_selection(self, d_row: int, d_col: int) -> None:
        """Move the selection, wrapping around the grid edges."""
        if self.paused:
            return
        if self.selected is None:
            self.select(0)
            return
        row, col = divmod(self.selected, SudokuGrid.SIZE)
        row = (row + d_row) % SudokuGrid.SIZE
        col = (col + d_col) % SudokuGrid.SIZE
        self.select(row * SudokuGrid.SIZE + col)

    def toggle_note_mode(self) -> bool:
        self.note_mode = not self.note_mode
        self._publish()
        return self.note_mode

    def enter(self, digit: int) -> bool:
        """
        Apply a digit key to the selected cell.

        In note mode 0 clears the candidates and 1-9 toggles one; otherwise
        the digit is placed (0 erases).
        """
        if not 0 <= digit <= SudokuGrid.SIZE:
            raise ValueError(f"Digit must be 0-{SudokuGrid.SIZE}, got {digit}")
        if self.paused or self.selected is None or self.is_clue(self.selected):
            return False

        if self.note_mode:
            if digit == 0:
                return self.clear_candidates(self.selected)
            return self.toggle_candidate(self.selected, digit)
        return self.set_value(self.selected, digit)

    # -- clock ---------------------------------------------------------

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        self._publish()
        return self.paused

    def tick(self) -> None:
        """Advance the clock by one second unless paused or finished."""
        if self.paused or self.won:
            return
        self.elapsed_seconds += 1

    def format_elapsed(self) -> str:
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    # -- observers -----------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Call listener with a fresh snapshot after every state change."""
        self._listeners.append(listener)

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            grid=tuple(self.grid.to_list()),
            initial=tuple(self.initial.to_list()),
            conflicts=frozenset(self.conflicts),
            candidates=tuple(
                self.notes.get(idx) if self.grid.is_empty(idx) else frozenset()
                for idx in range(SudokuGrid.CELL_COUNT)
            ),
            digit_counts=dict(self.digit_counts),
            exhausted_digits=self.exhausted_digits,
            selected=self.selected,
            note_mode=self.note_mode,
            paused=self.paused,
            elapsed_seconds=self.elapsed_seconds,
            won=self.won,
        )
