"""
Legal move generator for Deadblock.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Collection, Dict, List, Optional, Sequence, Tuple

from .board import Board, Player
from .pieces import ALL_PIECE_ORIENTATIONS, PIECE_IDS, Footprint, PieceOrientation
from .placement import is_placement_legal

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("DEADBLOCK_MOVEGEN_DEBUG", ""))


@dataclass(frozen=True)
class Move:
    """Represents a legal move in Deadblock."""
    piece_id: str
    anchor_row: int
    anchor_col: int
    rotation: int
    reflected: bool
    footprint: Footprint

    def positions(self) -> List[Tuple[int, int]]:
        """Get the (row, col) board positions this move occupies."""
        return [(self.anchor_row + dy, self.anchor_col + dx) for dx, dy in self.footprint]

    def apply_to(self, board: Board, owner: Player = Player.NEUTRAL) -> None:
        """Write this move onto a board. The move must already be legal there."""
        board.apply_placement(self.piece_id, self.anchor_row, self.anchor_col,
                              self.footprint, owner)

    def __str__(self):
        return (f"Move(piece_id={self.piece_id}, rotation={self.rotation}, "
                f"reflected={self.reflected}, anchor=({self.anchor_row}, {self.anchor_col}))")


class LegalMoveGenerator:
    """Generates all legal moves for a given board and set of used pieces."""

    def __init__(self):
        self.piece_orientations_cache: Dict[str, List[PieceOrientation]] = {
            piece_id: list(ALL_PIECE_ORIENTATIONS[piece_id]) for piece_id in PIECE_IDS
        }

    def available_pieces(self, used_pieces: Collection[str],
                         piece_order: Optional[Sequence[str]] = None) -> List[str]:
        """Pieces not yet used, in `piece_order` (catalog order by default)."""
        order = piece_order if piece_order is not None else PIECE_IDS
        used = set(used_pieces)
        return [piece_id for piece_id in order if piece_id not in used]

    def get_legal_moves(self, board: Board, used_pieces: Collection[str],
                        piece_order: Optional[Sequence[str]] = None) -> List[Move]:
        """
        Get every legal (piece, rotation, reflection, anchor) combination.

        Iterates reflection, then rotation, then every anchor cell of the grid
        for each unused piece, keeping what the placement validator accepts.
        An empty result means the player to move is deadblocked.

        Args:
            board: Current board state
            used_pieces: Piece letters already placed
            piece_order: Optional order in which pieces are enumerated

        Returns:
            List of legal moves
        """
        start = time.perf_counter()
        legal_moves = []
        available = self.available_pieces(used_pieces, piece_order)
        size = board.size

        for piece_id in available:
            for orientation in self.piece_orientations_cache[piece_id]:
                footprint = orientation.offsets
                for row in range(size):
                    for col in range(size):
                        if is_placement_legal(board, row, col, footprint):
                            legal_moves.append(Move(
                                piece_id=piece_id,
                                anchor_row=row,
                                anchor_col=col,
                                rotation=orientation.rotation,
                                reflected=orientation.reflected,
                                footprint=footprint,
                            ))

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen: legal_moves={len(legal_moves)}, pieces_checked={len(available)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation: {len(legal_moves)} moves in {elapsed_ms:.2f}ms, pieces_checked={len(available)}")

        return legal_moves

    def has_legal_move(self, board: Board, used_pieces: Collection[str]) -> bool:
        """Same search as get_legal_moves, stopping at the first legal placement."""
        size = board.size
        for piece_id in self.available_pieces(used_pieces):
            for orientation in self.piece_orientations_cache[piece_id]:
                for row in range(size):
                    for col in range(size):
                        if is_placement_legal(board, row, col, orientation.offsets):
                            return True
        return False


_DEFAULT_GENERATOR: Optional[LegalMoveGenerator] = None


def _default_generator() -> LegalMoveGenerator:
    global _DEFAULT_GENERATOR
    if _DEFAULT_GENERATOR is None:
        _DEFAULT_GENERATOR = LegalMoveGenerator()
    return _DEFAULT_GENERATOR


def get_all_valid_moves(board: Board, used_pieces: Collection[str]) -> List[Move]:
    """Module-level shortcut for LegalMoveGenerator().get_legal_moves."""
    return _default_generator().get_legal_moves(board, used_pieces)
