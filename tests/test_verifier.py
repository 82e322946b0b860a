"""
Tests for the Monte Carlo playability verifier.

The fixed positions below leave so few placements open that every rollout
behaves the same, which keeps the randomized verifier deterministic.
"""

import random
import unittest

from engine.board import Board
from engine.placement import is_placement_legal
from puzzles.verifier import find_playable_line, run_rollout, verify_puzzle_playable
from tests.utils_game_states import all_pieces_except, board_with_empty_cells

BOTTOM_STRIP = [(7, col) for col in range(5)]
# A 2x4 pocket (rows 4-5) that holds L but not I, plus the bottom strip that holds I only
TWO_POCKETS = BOTTOM_STRIP + [(row, col) for row in (4, 5) for col in range(4)]


class TestVerifier(unittest.TestCase):

    def test_zero_moves_is_trivially_playable(self):
        board = board_with_empty_cells([])
        self.assertTrue(verify_puzzle_playable(board, [], 0))
        self.assertEqual(find_playable_line(board, [], 0), [])

    def test_single_move_position(self):
        board = board_with_empty_cells(BOTTOM_STRIP)
        used = all_pieces_except('I')
        self.assertTrue(verify_puzzle_playable(board, used, 1, rng=random.Random(0)))
        self.assertFalse(verify_puzzle_playable(board, used, 2, rng=random.Random(0)))

    def test_two_move_position(self):
        board = board_with_empty_cells(TWO_POCKETS)
        used = all_pieces_except('I', 'L')
        for seed in range(5):
            line = find_playable_line(board, used, 2, rng=random.Random(seed))
            self.assertIsNotNone(line)
            self.assertEqual({m.piece_id for m in line}, {'I', 'L'})
        self.assertFalse(verify_puzzle_playable(board, used, 3, rng=random.Random(1)))

    def test_deadblocked_position_fails(self):
        board = board_with_empty_cells([(0, 0), (0, 1), (1, 0), (1, 1)])
        self.assertFalse(verify_puzzle_playable(board, [], 1, trials=3))

    def test_line_is_sequentially_legal(self):
        board = Board()
        line = find_playable_line(board, [], 6, rng=random.Random(4))
        self.assertIsNotNone(line)
        self.assertEqual(len(line), 6)
        self.assertEqual(len({m.piece_id for m in line}), 6)

        replay = Board()
        for move in line:
            self.assertTrue(is_placement_legal(replay, move.anchor_row, move.anchor_col, move.footprint))
            move.apply_to(replay)

    def test_rollout_does_not_touch_inputs(self):
        board = board_with_empty_cells(TWO_POCKETS)
        used = all_pieces_except('I', 'L')
        snapshot = board.to_string()
        used_before = list(used)

        played = run_rollout(board, used, 2, random.Random(3))
        self.assertEqual(len(played), 2)
        self.assertEqual(board.to_string(), snapshot)
        self.assertEqual(used, used_before)

    def test_rollout_stops_at_target(self):
        played = run_rollout(Board(), [], 3, random.Random(8))
        self.assertEqual(len(played), 3)


if __name__ == "__main__":
    unittest.main()
