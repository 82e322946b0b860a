"""
Interactive two-player Deadblock game state.

Players alternate placing unused pentominoes; the player left without a legal
placement is deadblocked and loses.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from .board import BOARD_SIZE, Board, InvalidPlacementError, Player
from .move_generator import LegalMoveGenerator, Move
from .pieces import PIECE_IDS, get_piece_coords
from .placement import explain_illegal_placement, is_placement_legal

if TYPE_CHECKING:
    from schemas.puzzle import Puzzle

logger = logging.getLogger(__name__)


class GameState:
    """
    Board, used pieces, player to move and move history for one game.

    The starting snapshot is kept so that undo can replay history onto it.
    """

    def __init__(self, board: Optional[Board] = None, used_pieces: Optional[List[str]] = None,
                 current_player: Player = Player.ONE,
                 move_generator: Optional[LegalMoveGenerator] = None):
        self.board = board.copy() if board is not None else Board(BOARD_SIZE)
        self.used_pieces: List[str] = list(used_pieces or [])
        if len(set(self.used_pieces)) != len(self.used_pieces):
            raise ValueError(f"Duplicate piece in used pieces: {self.used_pieces}")
        self.current_player = current_player
        self.history: List[Move] = []
        self.move_generator = move_generator or LegalMoveGenerator()

        self._start_board = self.board.copy()
        self._start_used = list(self.used_pieces)
        self._start_player = current_player

    @classmethod
    def from_puzzle(cls, puzzle: 'Puzzle',
                    move_generator: Optional[LegalMoveGenerator] = None) -> 'GameState':
        """Seed an independent game from a puzzle's board and used pieces."""
        return cls(board=puzzle.decode_board(), used_pieces=list(puzzle.used_pieces),
                   move_generator=move_generator)

    @property
    def remaining_pieces(self) -> List[str]:
        return [piece_id for piece_id in PIECE_IDS if piece_id not in self.used_pieces]

    def legal_moves(self) -> List[Move]:
        return self.move_generator.get_legal_moves(self.board, self.used_pieces)

    def is_deadblock(self) -> bool:
        """True when the player to move has no legal placement."""
        return not self.move_generator.has_legal_move(self.board, self.used_pieces)

    @property
    def winner(self) -> Optional[Player]:
        """The player who moved last, once the player to move is deadblocked."""
        if not self.history or not self.is_deadblock():
            return None
        return self.current_player.opponent

    def place_piece(self, piece_id: str, anchor_row: int, anchor_col: int,
                    rotation: int = 0, reflected: bool = False) -> Move:
        """
        Place a piece for the current player.

        Raises:
            InvalidPlacementError: If the piece is used or the footprint does
                not fit
            KeyError: If piece_id is not a pentomino letter
        """
        footprint = get_piece_coords(piece_id, rotation, reflected)
        move = Move(piece_id, anchor_row, anchor_col, rotation % 4, reflected, footprint)
        self.apply_move(move)
        return move

    def apply_move(self, move: Move) -> None:
        """
        Validate and apply a move, then hand the turn to the opponent.

        Raises:
            InvalidPlacementError: If the piece is used, the footprint is not
                the piece's shape under the move's orientation, or it does not fit
            KeyError: If the move's piece_id is not a pentomino letter
        """
        expected = get_piece_coords(move.piece_id, move.rotation, move.reflected)
        if sorted(tuple(cell) for cell in move.footprint) != sorted(expected):
            raise InvalidPlacementError(move.piece_id, move.anchor_row, move.anchor_col,
                                        "footprint does not match the piece orientation")
        if move.piece_id in self.used_pieces:
            raise InvalidPlacementError(move.piece_id, move.anchor_row, move.anchor_col,
                                        "piece already used")
        if not is_placement_legal(self.board, move.anchor_row, move.anchor_col, move.footprint):
            reason = explain_illegal_placement(self.board, move.anchor_row, move.anchor_col,
                                               move.footprint)
            raise InvalidPlacementError(move.piece_id, move.anchor_row, move.anchor_col, reason)

        move.apply_to(self.board, self.current_player)
        self.used_pieces.append(move.piece_id)
        self.history.append(move)
        logger.debug(f"Player {self.current_player.value} placed {move}")
        self.current_player = self.current_player.opponent

    def undo(self) -> Optional[Move]:
        """
        Take back the last move by replaying the rest of the history.

        Returns:
            The removed move, or None if there was nothing to undo
        """
        if not self.history:
            return None

        removed = self.history[-1]
        replay = self.history[:-1]
        self.board = self._start_board.copy()
        self.used_pieces = list(self._start_used)
        self.current_player = self._start_player
        self.history = []
        for move in replay:
            self.apply_move(move)
        return removed
