"""Session module: live game state, candidate notes and undo history."""

from .game import GameSession
from .history import EditHistory, EditRecord
from .notes import CandidateNotes
from .snapshot import SessionSnapshot

__all__ = ["GameSession", "EditHistory", "EditRecord", "CandidateNotes", "SessionSnapshot"]
