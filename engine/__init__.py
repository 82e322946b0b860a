"""
Deadblock game engine package.

This package contains the core game logic for Deadblock, including:
- Pentomino definitions and orientations
- Board management and serialization
- Placement legality
- Legal move generation
- Interactive two-player game state
"""

from .board import BOARD_SIZE, Board, InvalidPlacementError, Player, create_empty_board
from .game import GameState
from .move_generator import LegalMoveGenerator, Move, get_all_valid_moves
from .pieces import PIECE_IDS, Piece, PieceGenerator, PieceOrientation, get_piece_coords
from .placement import is_placement_legal

__all__ = [
    'BOARD_SIZE', 'Board', 'InvalidPlacementError', 'Player', 'create_empty_board',
    'Piece', 'PieceGenerator', 'PieceOrientation', 'PIECE_IDS', 'get_piece_coords',
    'is_placement_legal',
    'Move', 'LegalMoveGenerator', 'get_all_valid_moves',
    'GameState',
]
