"""Sudoku puzzle generation and game session engine."""

from .core import SudokuGrid
from .generator import SudokuGenerator, Difficulty
from .session import GameSession, SessionSnapshot

__all__ = ["SudokuGrid", "SudokuGenerator", "Difficulty", "GameSession", "SessionSnapshot"]
