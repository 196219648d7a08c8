"""Read-only view of a game session for display collaborators."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs after an operation."""
    grid: Tuple[int, ...]
    initial: Tuple[int, ...]
    conflicts: FrozenSet[int]
    candidates: Tuple[FrozenSet[int], ...]
    digit_counts: Dict[int, int]
    exhausted_digits: FrozenSet[int]
    selected: Optional[int]
    note_mode: bool
    paused: bool
    elapsed_seconds: int
    won: bool

    def is_clue(self, idx: int) -> bool:
        return self.initial[idx] != 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to a JSON-friendly dictionary."""
        return {
            "grid": list(self.grid),
            "initial": list(self.initial),
            "conflicts": sorted(self.conflicts),
            "candidates": {
                idx: sorted(digits)
                for idx, digits in enumerate(self.candidates)
                if digits
            },
            "digit_counts": dict(self.digit_counts),
            "exhausted_digits": sorted(self.exhausted_digits),
            "selected": self.selected,
            "note_mode": self.note_mode,
            "paused": self.paused,
            "elapsed_seconds": self.elapsed_seconds,
            "won": self.won,
        }
