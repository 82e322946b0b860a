"""
Pydantic schemas for generated and hand-made puzzles.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from engine.board import BOARD_SIZE, EMPTY_MARKER, PIECE_ALIASES, Board
from engine.move_generator import Move
from engine.pieces import PIECE_IDS, TOTAL_PIECES, get_piece_coords


class Difficulty(str, Enum):
    """Puzzle difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PuzzleMove(BaseModel):
    """One placement of a puzzle's solution line."""
    piece_id: str = Field(..., min_length=1, max_length=1)
    anchor_row: int = Field(..., ge=0, lt=BOARD_SIZE)
    anchor_col: int = Field(..., ge=0, lt=BOARD_SIZE)
    rotation: int = Field(0, ge=0, le=3)
    reflected: bool = False

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "piece_id": "L",
                "anchor_row": 6,
                "anchor_col": 0,
                "rotation": 1,
                "reflected": False
            }
        }
    )

    @classmethod
    def from_move(cls, move: Move) -> "PuzzleMove":
        return cls(piece_id=move.piece_id, anchor_row=move.anchor_row,
                   anchor_col=move.anchor_col, rotation=move.rotation,
                   reflected=move.reflected)

    def to_move(self) -> Move:
        return Move(self.piece_id, self.anchor_row, self.anchor_col, self.rotation,
                    self.reflected, get_piece_coords(self.piece_id, self.rotation, self.reflected))


class Puzzle(BaseModel):
    """A pre-filled board plus the number of further moves it supports."""
    id: str
    name: str
    difficulty: str
    description: str
    board_state: str = Field(..., min_length=BOARD_SIZE * BOARD_SIZE,
                             max_length=BOARD_SIZE * BOARD_SIZE,
                             description="Row-major board, one character per cell")
    used_pieces: Tuple[str, ...] = Field(description="Pieces already on the board")
    moves_remaining: int = Field(..., ge=1, le=TOTAL_PIECES)
    seed: Optional[int] = None
    solution: Tuple[PuzzleMove, ...] = Field(default=(),
                                             description="A line of play proving the puzzle is playable")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "puzzle-1760000000000-k3x9qa",
                "name": "Easy Puzzle",
                "difficulty": "easy",
                "description": "3 moves remaining - Find the winning sequence!",
                "board_state": "GGGXGGGGGIXXXGNGGIGXGNNYGIUUUNYYGIUWUNGYGIWWFFGYGWWGGFFGGGGGGFGG",
                "used_pieces": ["X", "I", "N", "Y", "U", "W", "F"],
                "moves_remaining": 3,
                "seed": None,
                "solution": []
            }
        }
    )

    @field_validator("board_state")
    @classmethod
    def _check_board_alphabet(cls, value: str) -> str:
        allowed = set(PIECE_IDS) | set(PIECE_ALIASES) | {EMPTY_MARKER}
        bad = sorted(set(value) - allowed)
        if bad:
            raise ValueError(f"board_state contains unknown characters: {bad}")
        return value

    @field_validator("used_pieces")
    @classmethod
    def _check_used_pieces(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [piece_id for piece_id in value if piece_id not in PIECE_IDS]
        if unknown:
            raise ValueError(f"Unknown pieces in used_pieces: {unknown}")
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate pieces in used_pieces: {list(value)}")
        return value

    def decode_board(self) -> Board:
        """Rebuild a fresh, independently mutable Board from board_state."""
        return Board.from_string(self.board_state)
