"""
Deadblock piece definitions: the 12 pentominoes and their rotations/reflections.

Offsets are (x, y) pairs where x is a column offset and y a row offset, so a
footprint placed at anchor (row, col) covers cells (row + y, col + x).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

Offset = Tuple[int, int]
Footprint = Tuple[Offset, ...]

PIECE_SIZE = 5
ROTATION_STEPS = 4

# Canonical cell sets, one per pentomino letter
PIECE_SHAPES: Dict[str, List[Offset]] = {
    'F': [(0, 0), (0, 1), (1, 1), (2, 1), (1, 2)],
    'I': [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)],
    'L': [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3)],
    'N': [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1)],
    'P': [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)],
    'T': [(0, 0), (1, 0), (2, 0), (1, 1), (1, 2)],
    'U': [(0, 0), (0, 1), (1, 1), (2, 0), (2, 1)],
    'V': [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)],
    'W': [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)],
    'X': [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)],
    'Y': [(0, 1), (1, 0), (1, 1), (1, 2), (1, 3)],
    'Z': [(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)],
}

PIECE_IDS: Tuple[str, ...] = tuple(PIECE_SHAPES)
TOTAL_PIECES = len(PIECE_IDS)


def normalize_offsets(offsets: Sequence[Offset]) -> Footprint:
    """
    Re-base offsets so that min x = 0 and min y = 0.

    Args:
        offsets: Sequence of (x, y) tuples

    Returns:
        Normalized offsets, sorted for canonical ordering
    """
    if len(offsets) == 0:
        return ()

    coords = np.asarray(offsets, dtype=int)
    coords = coords - coords.min(axis=0)
    return tuple(sorted((int(x), int(y)) for x, y in coords))


def rotate_offsets(offsets: Sequence[Offset]) -> Footprint:
    """Rotate offsets 90 degrees clockwise: (x, y) -> (y, -x), then normalize."""
    coords = np.asarray(offsets, dtype=int)
    rotated = np.stack([coords[:, 1], -coords[:, 0]], axis=1)
    return normalize_offsets([tuple(c) for c in rotated])


def reflect_offsets(offsets: Sequence[Offset]) -> Footprint:
    """Mirror offsets across the vertical axis (negate x), then normalize."""
    coords = np.asarray(offsets, dtype=int)
    mirrored = np.stack([-coords[:, 0], coords[:, 1]], axis=1)
    return normalize_offsets([tuple(c) for c in mirrored])


def is_orthogonally_connected(offsets: Sequence[Offset]) -> bool:
    """Check that every cell can reach every other through shared edges."""
    cells = set(offsets)
    if not cells:
        return False

    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for dx, dy in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            neighbor = (x + dx, y + dy)
            if neighbor in cells and neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return len(seen) == len(cells)


def _rotation_steps(rotation: int) -> int:
    """Accept either a step count (0-3) or degrees (90, 180, 270)."""
    if rotation >= 90:
        rotation = rotation // 90
    return rotation % ROTATION_STEPS


def get_piece_coords(piece_id: str, rotation: int = 0, reflected: bool = False) -> Footprint:
    """
    Get the normalized footprint of a piece under a rotation and reflection.

    The reflection is applied first, then `rotation` clockwise quarter turns.

    Args:
        piece_id: Pentomino letter
        rotation: Rotation step 0-3 (degrees 90/180/270 also accepted)
        reflected: Whether to mirror the piece before rotating

    Returns:
        Tuple of 5 normalized (x, y) offsets

    Raises:
        KeyError: If piece_id is not one of the 12 pentominoes
    """
    coords = normalize_offsets(PIECE_SHAPES[piece_id])
    if reflected:
        coords = reflect_offsets(coords)
    for _ in range(_rotation_steps(rotation)):
        coords = rotate_offsets(coords)
    return coords


@dataclass(frozen=True)
class Piece:
    """Represents a Deadblock piece."""
    id: str
    name: str
    offsets: Footprint

    def __post_init__(self):
        """Validate piece after initialization."""
        if len(set(self.offsets)) != PIECE_SIZE:
            raise ValueError(f"Piece {self.id} must have exactly {PIECE_SIZE} distinct cells")
        if normalize_offsets(self.offsets) != tuple(sorted(self.offsets)):
            raise ValueError(f"Piece {self.id} offsets are not normalized")
        if not is_orthogonally_connected(self.offsets):
            raise ValueError(f"Piece {self.id} cells are not orthogonally connected")

    @property
    def size(self) -> int:
        return len(self.offsets)


@dataclass(frozen=True)
class PieceOrientation:
    """One (rotation, reflection) transform of a piece and its footprint."""
    piece_id: str
    rotation: int
    reflected: bool
    offsets: Footprint

    @property
    def width(self) -> int:
        return max(x for x, _ in self.offsets) + 1

    @property
    def height(self) -> int:
        return max(y for _, y in self.offsets) + 1


class PieceGenerator:
    """Builds the Deadblock piece set."""

    @staticmethod
    def get_all_pieces() -> List[Piece]:
        """Get all 12 pentominoes in catalog order."""
        return [
            Piece(piece_id, f"Pentomino {piece_id}", normalize_offsets(offsets))
            for piece_id, offsets in PIECE_SHAPES.items()
        ]

    @staticmethod
    def get_piece_by_id(piece_id: str) -> Optional[Piece]:
        """Get a piece by its letter."""
        for piece in PieceGenerator.get_all_pieces():
            if piece.id == piece_id:
                return piece
        return None


def generate_orientations_for_piece(piece_id: str) -> List[PieceOrientation]:
    """
    Generate all 8 transforms (4 rotations x 2 reflections) of a piece.

    Symmetric pieces produce repeated footprints; they are kept so that every
    (rotation, reflection) pair has an entry.
    """
    orientations = []
    for reflected in (False, True):
        for rotation in range(ROTATION_STEPS):
            orientations.append(PieceOrientation(
                piece_id=piece_id,
                rotation=rotation,
                reflected=reflected,
                offsets=get_piece_coords(piece_id, rotation, reflected),
            ))
    return orientations


# Global registry of all piece orientations
ALL_PIECE_ORIENTATIONS: Dict[str, List[PieceOrientation]] = {}


def init_piece_orientations():
    """
    Initialize the global ALL_PIECE_ORIENTATIONS registry.

    Validates every catalog shape on the way through.
    """
    if ALL_PIECE_ORIENTATIONS:
        return  # Already initialized

    for piece in PieceGenerator.get_all_pieces():
        ALL_PIECE_ORIENTATIONS[piece.id] = generate_orientations_for_piece(piece.id)


def unique_footprints(piece_id: str) -> List[Footprint]:
    """Distinct footprints of a piece, in registry order."""
    seen = []
    for orientation in ALL_PIECE_ORIENTATIONS[piece_id]:
        if orientation.offsets not in seen:
            seen.append(orientation.offsets)
    return seen


# Initialize on import (after PieceGenerator is defined)
init_piece_orientations()
