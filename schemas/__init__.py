"""
Pydantic schemas for Deadblock puzzles.
"""

from .puzzle import Difficulty, Puzzle, PuzzleMove

__all__ = [
    "Difficulty",
    "Puzzle",
    "PuzzleMove",
]
