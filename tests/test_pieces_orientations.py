"""
Tests for pentomino geometry and orientation precomputation.
"""

import unittest

import pytest

from engine.pieces import (
    ALL_PIECE_ORIENTATIONS, PIECE_IDS, PIECE_SHAPES, Piece, PieceGenerator,
    get_piece_coords, is_orthogonally_connected, normalize_offsets,
    reflect_offsets, rotate_offsets, unique_footprints,
)


class TestPieceOrientations(unittest.TestCase):
    """Test piece orientation precomputation."""

    def test_catalog_has_twelve_pieces(self):
        pieces = PieceGenerator.get_all_pieces()
        self.assertEqual([p.id for p in pieces], list("FILNPTUVWXYZ"))
        for piece in pieces:
            self.assertEqual(piece.size, 5)

    def test_every_transform_is_a_valid_footprint(self):
        """Every (piece, rotation, reflection) gives 5 connected, normalized cells."""
        for piece_id in PIECE_IDS:
            for reflected in (False, True):
                for rotation in range(4):
                    coords = get_piece_coords(piece_id, rotation, reflected)
                    self.assertEqual(len(coords), 5)
                    self.assertEqual(len(set(coords)), 5)
                    self.assertTrue(is_orthogonally_connected(coords),
                                    f"{piece_id} r={rotation} f={reflected} not connected")
                    self.assertEqual(min(x for x, _ in coords), 0)
                    self.assertEqual(min(y for _, y in coords), 0)

    def test_registry_has_eight_entries_per_piece(self):
        for piece_id in PIECE_IDS:
            orientations = ALL_PIECE_ORIENTATIONS[piece_id]
            self.assertEqual(len(orientations), 8)
            pairs = {(o.rotation, o.reflected) for o in orientations}
            self.assertEqual(len(pairs), 8)

    def test_x_pentomino_is_rotation_invariant(self):
        for reflected in (False, True):
            base = get_piece_coords('X', 0, reflected)
            for rotation in range(1, 4):
                self.assertEqual(get_piece_coords('X', rotation, reflected), base)
        self.assertEqual(len(unique_footprints('X')), 1)

    def test_unique_footprint_counts(self):
        """Known symmetry classes of the pentominoes."""
        expected = {
            'F': 8, 'I': 2, 'L': 8, 'N': 8, 'P': 8, 'T': 4,
            'U': 4, 'V': 4, 'W': 4, 'X': 1, 'Y': 8, 'Z': 4,
        }
        for piece_id, count in expected.items():
            self.assertEqual(len(unique_footprints(piece_id)), count, piece_id)

    def test_four_rotations_return_to_start(self):
        for piece_id, offsets in PIECE_SHAPES.items():
            coords = normalize_offsets(offsets)
            rotated = coords
            for _ in range(4):
                rotated = rotate_offsets(rotated)
            self.assertEqual(rotated, coords)

    def test_double_reflection_is_identity(self):
        for offsets in PIECE_SHAPES.values():
            coords = normalize_offsets(offsets)
            self.assertEqual(reflect_offsets(reflect_offsets(coords)), coords)

    def test_degrees_are_accepted(self):
        self.assertEqual(get_piece_coords('L', 90), get_piece_coords('L', 1))
        self.assertEqual(get_piece_coords('L', 270, True), get_piece_coords('L', 3, True))

    def test_i_pentomino_orientations(self):
        vertical = get_piece_coords('I', 0)
        horizontal = get_piece_coords('I', 1)
        self.assertEqual(vertical, ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4)))
        self.assertEqual(horizontal, ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)))

    def test_normalize_offsets(self):
        self.assertEqual(normalize_offsets([(2, 3), (2, 4), (3, 3)]), ((0, 0), (0, 1), (1, 0)))
        self.assertEqual(normalize_offsets([(0, 0), (0, 1)]), ((0, 0), (0, 1)))
        self.assertEqual(normalize_offsets([]), ())


def test_unknown_piece_raises():
    with pytest.raises(KeyError):
        get_piece_coords('Q')


def test_piece_validation_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Piece('?', 'four cells', ((0, 0), (0, 1), (0, 2), (0, 3)))
    with pytest.raises(ValueError):
        Piece('?', 'disconnected', ((0, 0), (0, 1), (0, 2), (0, 3), (2, 3)))
    with pytest.raises(ValueError):
        Piece('?', 'not normalized', ((1, 1), (1, 2), (1, 3), (1, 4), (1, 5)))


def test_get_piece_by_id():
    piece = PieceGenerator.get_piece_by_id('T')
    assert piece is not None
    assert piece.offsets == normalize_offsets(PIECE_SHAPES['T'])
    assert PieceGenerator.get_piece_by_id('Q') is None


if __name__ == "__main__":
    unittest.main()
