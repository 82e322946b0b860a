"""
Placement scoring used by the puzzle generator.

score = center_weight * (sum of Manhattan distances of the footprint cells to
the board center) + open_space_weight * (empty cells orthogonally adjacent to
the footprint) + uniform jitter in [0, jitter).
"""

import random
from typing import Optional

from engine.board import Board
from engine.move_generator import Move

from .config import HeuristicWeights


def center_distance(board: Board, move: Move) -> float:
    """Summed Manhattan distance of the move's cells to the board center."""
    center = (board.size - 1) / 2.0
    return sum(abs(r - center) + abs(c - center) for r, c in move.positions())


def open_neighbor_count(board: Board, move: Move) -> int:
    """
    Count empty, in-bounds cells orthogonally adjacent to the footprint.

    Counted per footprint cell, so a cell bordering two footprint cells counts
    twice. Footprint cells themselves are excluded.
    """
    covered = set(move.positions())
    count = 0
    for r, c in covered:
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nr, nc = r + dr, c + dc
            if (nr, nc) in covered:
                continue
            if board.is_valid_position(nr, nc) and board.is_empty(nr, nc):
                count += 1
    return count


def heuristic_score(board: Board, move: Move, weights: HeuristicWeights) -> float:
    """Weighted part of the score, without jitter."""
    return (weights.center_weight * center_distance(board, move)
            + weights.open_space_weight * open_neighbor_count(board, move))


def score_move(board: Board, move: Move, weights: HeuristicWeights,
               rng: Optional[random.Random] = None, use_heuristic: bool = True) -> float:
    """
    Score a candidate placement.

    Args:
        board: Board the move would be applied to (before placement)
        move: Candidate move
        weights: Heuristic weights
        rng: Randomness source for the jitter term
        use_heuristic: False scores by jitter alone

    Returns:
        Higher is better
    """
    rng = rng or random.Random()
    score = heuristic_score(board, move, weights) if use_heuristic else 0.0
    if weights.jitter > 0:
        score += rng.random() * weights.jitter
    return score
