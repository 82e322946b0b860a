"""
Deadblock Board implementation: an 8x8 grid tracking which piece owns each cell.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .pieces import PIECE_IDS, Offset

BOARD_SIZE = 8

# Serialization markers
EMPTY_MARKER = 'G'
PIECE_ALIASES = {'H': 'Y'}

# Grid value for an empty cell
_EMPTY = ''


class Player(Enum):
    """Player enumeration. NEUTRAL marks cells pre-filled by a puzzle."""
    NEUTRAL = 0
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> 'Player':
        if self is Player.ONE:
            return Player.TWO
        if self is Player.TWO:
            return Player.ONE
        return Player.NEUTRAL


class InvalidPlacementError(ValueError):
    """Raised when a placement the validator rejects is applied anyway."""

    def __init__(self, piece_id: str, anchor_row: int, anchor_col: int, reason: str):
        self.piece_id = piece_id
        self.anchor_row = anchor_row
        self.anchor_col = anchor_col
        self.reason = reason
        super().__init__(f"Cannot place {piece_id} at ({anchor_row}, {anchor_col}): {reason}")


class Board:
    """
    Deadblock game board.

    `cells` holds the piece letter for occupied cells and '' for empty ones;
    `owners` holds the Player value that placed the piece (0 for pre-filled
    puzzle cells).
    """

    def __init__(self, size: int = BOARD_SIZE):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.cells = np.full((size, size), _EMPTY, dtype='<U1')
        self.owners = np.zeros((size, size), dtype=int)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """Get the piece letter at a position, or None if empty."""
        value = self.cells[row, col]
        return str(value) if value != _EMPTY else None

    def get_owner(self, row: int, col: int) -> Optional[Player]:
        """Get the player who placed the piece at a position, or None if empty."""
        if self.is_empty(row, col):
            return None
        return Player(int(self.owners[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        """Check if a position is empty."""
        return self.cells[row, col] == _EMPTY

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells != _EMPTY))

    def empty_count(self) -> int:
        return self.size * self.size - self.occupied_count()

    def placed_piece_ids(self) -> List[str]:
        """Distinct piece letters on the board, in row-major order of first appearance."""
        seen = []
        for value in self.cells.flat:
            if value != _EMPTY and value not in seen:
                seen.append(str(value))
        return seen

    def cells_of(self, piece_id: str) -> List[Tuple[int, int]]:
        """All (row, col) cells carrying a piece letter."""
        rows, cols = np.nonzero(self.cells == piece_id)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def apply_placement(self, piece_id: str, anchor_row: int, anchor_col: int,
                        footprint: Iterable[Offset], owner: Player = Player.NEUTRAL) -> None:
        """
        Mark the footprint cells with a piece.

        Legality is NOT checked here; callers must have confirmed the placement
        with engine.placement.is_placement_legal first.
        """
        for dx, dy in footprint:
            self.cells[anchor_row + dy, anchor_col + dx] = piece_id
            self.owners[anchor_row + dy, anchor_col + dx] = owner.value

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board.cells = self.cells.copy()
        new_board.owners = self.owners.copy()
        return new_board

    def to_string(self) -> str:
        """Serialize row-major, one character per cell, EMPTY_MARKER for empty cells."""
        return ''.join(
            EMPTY_MARKER if value == _EMPTY else str(value)
            for value in self.cells.flat
        )

    @classmethod
    def from_string(cls, state: str, size: int = BOARD_SIZE,
                    owner: Player = Player.NEUTRAL) -> 'Board':
        """
        Parse a serialized board.

        Raises:
            ValueError: If the length is not size*size or a character is not a
                piece letter, alias or the empty marker
        """
        if len(state) != size * size:
            raise ValueError(f"Board state must have {size * size} characters, got {len(state)}")

        board = cls(size)
        for index, char in enumerate(state):
            if char == EMPTY_MARKER:
                continue
            piece_id = PIECE_ALIASES.get(char, char)
            if piece_id not in PIECE_IDS:
                raise ValueError(f"Unknown board character {char!r} at index {index}")
            row, col = divmod(index, size)
            board.cells[row, col] = piece_id
            board.owners[row, col] = owner.value
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        """String representation of the board."""
        result = []
        for row in range(self.size):
            result.append(''.join(
                '.' if value == _EMPTY else str(value) for value in self.cells[row]
            ))
        return "\n".join(result)


def create_empty_board(size: int = BOARD_SIZE) -> Board:
    """Create a board with every cell empty."""
    return Board(size)
