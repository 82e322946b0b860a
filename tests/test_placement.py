"""
Tests for placement legality.
"""

import itertools
import random

import pytest

from engine.board import Board
from engine.pieces import PIECE_IDS, get_piece_coords
from engine.placement import (
    explain_illegal_placement, has_overlap, is_placement_legal, is_within_bounds,
)

I_HORIZONTAL = get_piece_coords('I', 1)


def test_legal_on_empty_board():
    board = Board()
    assert is_placement_legal(board, 0, 0, I_HORIZONTAL)
    assert is_placement_legal(board, 7, 3, I_HORIZONTAL)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 4), (7, 4)])
def test_out_of_bounds_is_illegal(row, col):
    board = Board()
    assert not is_placement_legal(board, row, col, I_HORIZONTAL)
    assert not is_within_bounds(board, row, col, I_HORIZONTAL)


def test_occupied_cell_is_illegal():
    board = Board()
    board.apply_placement('X', 0, 0, [(0, 0)])
    assert not is_placement_legal(board, 0, 0, I_HORIZONTAL)
    assert has_overlap(board, 0, 0, I_HORIZONTAL)
    # One row down is free
    assert is_placement_legal(board, 1, 0, I_HORIZONTAL)


def test_legality_is_bounds_and_emptiness_only():
    """Compare against a direct restatement of the rule on random boards."""
    rng = random.Random(11)
    for _ in range(20):
        board = Board()
        for row, col in itertools.product(range(8), range(8)):
            if rng.random() < 0.3:
                board.apply_placement('Z', row, col, [(0, 0)])

        for piece_id in PIECE_IDS:
            footprint = get_piece_coords(piece_id, rng.randrange(4), rng.random() < 0.5)
            for row, col in itertools.product(range(-2, 9), range(-2, 9)):
                expected = all(
                    0 <= row + dy < 8 and 0 <= col + dx < 8 and board.is_empty(row + dy, col + dx)
                    for dx, dy in footprint
                )
                assert is_placement_legal(board, row, col, footprint) == expected


def test_explain_illegal_placement():
    board = Board()
    assert explain_illegal_placement(board, 0, 0, I_HORIZONTAL) is None
    assert "off the board" in explain_illegal_placement(board, 0, 5, I_HORIZONTAL)

    board.apply_placement('T', 0, 2, [(0, 0)])
    reason = explain_illegal_placement(board, 0, 0, I_HORIZONTAL)
    assert "occupied by T" in reason
