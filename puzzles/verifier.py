"""
Monte Carlo playability check for generated puzzles.

A greedily built board does not guarantee that the required number of further
moves can be played in sequence. Each trial plays uniformly random legal moves
on a private copy of the position; the puzzle is accepted as soon as one trial
reaches the target. A failed verification may be a false negative, never a
false positive, because every rollout move comes from the legal move list.
"""

import logging
import random
from typing import Collection, List, Optional

from engine.board import Board
from engine.move_generator import LegalMoveGenerator, Move

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 30


def run_rollout(board: Board, used_pieces: Collection[str], moves_required: int,
                rng: random.Random,
                move_generator: Optional[LegalMoveGenerator] = None) -> List[Move]:
    """
    Play random legal moves from a copy of the position.

    Stops when `moves_required` moves have been played or no legal move is left.
    The caller's board and used pieces are never modified.

    Returns:
        The moves played, in order
    """
    move_generator = move_generator or LegalMoveGenerator()
    scratch = board.copy()
    used = list(used_pieces)
    played: List[Move] = []

    while len(played) < moves_required:
        moves = move_generator.get_legal_moves(scratch, used)
        if not moves:
            break
        move = rng.choice(moves)
        move.apply_to(scratch)
        used.append(move.piece_id)
        played.append(move)

    return played


def find_playable_line(board: Board, used_pieces: Collection[str], moves_required: int,
                       trials: int = DEFAULT_TRIALS, rng: Optional[random.Random] = None,
                       move_generator: Optional[LegalMoveGenerator] = None) -> Optional[List[Move]]:
    """
    Search for a sequence of `moves_required` legal moves by random rollouts.

    Returns:
        The first successful line, or None if all trials fell short
    """
    if moves_required <= 0:
        return []

    rng = rng or random.Random()
    move_generator = move_generator or LegalMoveGenerator()

    for trial in range(trials):
        line = run_rollout(board, used_pieces, moves_required, rng, move_generator)
        if len(line) >= moves_required:
            logger.debug(f"Verification trial {trial + 1}/{trials} reached {moves_required} moves")
            return line
        logger.debug(f"Verification trial {trial + 1}/{trials} stopped after {len(line)}/{moves_required} moves")

    logger.debug(f"Verification failed: no trial of {trials} reached {moves_required} moves")
    return None


def verify_puzzle_playable(board: Board, used_pieces: Collection[str], moves_required: int,
                           trials: int = DEFAULT_TRIALS, rng: Optional[random.Random] = None,
                           move_generator: Optional[LegalMoveGenerator] = None) -> bool:
    """True if some rollout plays `moves_required` further moves from the position."""
    return find_playable_line(board, used_pieces, moves_required, trials, rng,
                              move_generator) is not None
