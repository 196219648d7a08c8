"""Undo history of value edits."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional


@dataclass(frozen=True)
class EditRecord:
    """A single value edit, enough to reverse it on the edited cell."""
    index: int
    previous: int
    value: int
    previous_candidates: FrozenSet[int] = field(default_factory=frozenset)


class EditHistory:
    """LIFO stack of edit records."""

    def __init__(self):
        self._records: List[EditRecord] = []

    def push(self, record: EditRecord) -> None:
        self._records.append(record)

    def pop(self) -> Optional[EditRecord]:
        """Remove and return the most recent record, or None if empty."""
        if not self._records:
            return None
        return self._records.pop()

    def peek(self) -> Optional[EditRecord]:
        return self._records[-1] if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
