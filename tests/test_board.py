"""
Tests for the Board model and its serialization.
"""

import unittest

import numpy as np
import pytest

from engine.board import BOARD_SIZE, EMPTY_MARKER, Board, Player, create_empty_board
from engine.pieces import get_piece_coords


class TestBoard(unittest.TestCase):
    """Test the Board class."""

    def test_board_initialization(self):
        board = create_empty_board()
        self.assertEqual(board.size, BOARD_SIZE)
        self.assertEqual(board.cells.shape, (8, 8))
        self.assertEqual(board.occupied_count(), 0)
        self.assertEqual(board.empty_count(), 64)
        self.assertTrue(board.is_empty(0, 0))
        self.assertIsNone(board.get_cell(3, 3))
        self.assertIsNone(board.get_owner(3, 3))

    def test_position_validation(self):
        board = Board()
        self.assertTrue(board.is_valid_position(0, 0))
        self.assertTrue(board.is_valid_position(7, 7))
        self.assertFalse(board.is_valid_position(-1, 0))
        self.assertFalse(board.is_valid_position(0, 8))
        self.assertFalse(board.is_valid_position(8, 0))

    def test_apply_placement_marks_exactly_the_footprint(self):
        board = Board()
        before = board.cells.copy()
        footprint = get_piece_coords('L', 1)
        board.apply_placement('L', 2, 1, footprint, Player.ONE)

        expected = {(2 + dy, 1 + dx) for dx, dy in footprint}
        self.assertEqual(set(board.cells_of('L')), expected)
        self.assertEqual(board.occupied_count(), 5)
        for row in range(8):
            for col in range(8):
                if (row, col) in expected:
                    self.assertEqual(board.get_cell(row, col), 'L')
                    self.assertEqual(board.get_owner(row, col), Player.ONE)
                else:
                    self.assertEqual(board.cells[row, col], before[row, col])

    def test_copy_is_independent(self):
        board = Board()
        board.apply_placement('I', 0, 0, get_piece_coords('I', 0))
        clone = board.copy()
        clone.apply_placement('X', 3, 3, get_piece_coords('X'))

        self.assertEqual(board.occupied_count(), 5)
        self.assertEqual(clone.occupied_count(), 10)
        self.assertTrue(board.is_empty(4, 4))

    def test_placed_piece_ids(self):
        board = Board()
        board.apply_placement('T', 0, 0, get_piece_coords('T'))
        board.apply_placement('P', 5, 5, get_piece_coords('P'))
        self.assertEqual(board.placed_piece_ids(), ['T', 'P'])

    def test_str(self):
        board = Board()
        board.apply_placement('I', 0, 0, get_piece_coords('I', 1))
        lines = str(board).split("\n")
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], "IIIII...")
        self.assertEqual(lines[1], "........")


class TestBoardSerialization:
    """Test the row-major string format."""

    def test_empty_board_string(self):
        assert Board().to_string() == EMPTY_MARKER * 64

    def test_round_trip(self):
        board = Board()
        board.apply_placement('W', 1, 2, get_piece_coords('W', 2, True))
        board.apply_placement('U', 5, 0, get_piece_coords('U', 1))
        state = board.to_string()

        assert len(state) == 64
        restored = Board.from_string(state)
        assert restored == board
        assert np.array_equal(restored.cells, board.cells)

    def test_row_major_order(self):
        board = Board()
        board.apply_placement('V', 0, 5, get_piece_coords('V', 0))
        state = board.to_string()
        assert state[5] == 'V'
        assert state[8 + 5] == 'V'
        assert state[16 + 5] == 'V'

    def test_alias_is_resolved(self):
        state = 'H' + EMPTY_MARKER * 63
        board = Board.from_string(state)
        assert board.get_cell(0, 0) == 'Y'
        assert board.get_owner(0, 0) == Player.NEUTRAL

    def test_bad_length_raises(self):
        with pytest.raises(ValueError):
            Board.from_string(EMPTY_MARKER * 63)

    def test_bad_character_raises(self):
        with pytest.raises(ValueError):
            Board.from_string('Q' + EMPTY_MARKER * 63)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Board(0)


def test_player_opponent():
    assert Player.ONE.opponent is Player.TWO
    assert Player.TWO.opponent is Player.ONE


if __name__ == "__main__":
    unittest.main()
