"""
Hand-made puzzles shipped with the game.

Board strings use 'G' for empty cells; older entries use 'H' as an alias for
the Y piece, which Board.from_string resolves.
"""

from typing import Dict, List

from engine.board import Board
from schemas.puzzle import Difficulty, Puzzle

CATALOG_PUZZLES: List[Puzzle] = [
    Puzzle(
        id="1",
        name="Endgame Position",
        difficulty=Difficulty.EASY.value,
        description="Find the winning move in this endgame position!",
        board_state="GGGXGGGGGIXXXGNGGIGXGNNHGIUUUNHHGIUWUNGHGIWWFFGHGWWGGFFGGGGGGFGG",
        used_pieces=("X", "I", "N", "Y", "U", "W", "F"),
        # Labelled a 3-move puzzle in the game, not 12 minus the pieces on the board
        moves_remaining=3,
    ),
]

_BY_ID: Dict[str, Puzzle] = {puzzle.id: puzzle for puzzle in CATALOG_PUZZLES}


def get_catalog_puzzle(puzzle_id: str) -> Puzzle:
    """
    Look up a built-in puzzle.

    Raises:
        KeyError: If no puzzle has that id
    """
    return _BY_ID[str(puzzle_id)]


def parse_puzzle_board(puzzle: Puzzle) -> Board:
    """Decode a puzzle's board string into a fresh Board."""
    return Board.from_string(puzzle.board_state)
