"""
Local puzzle generator for Deadblock.

Each attempt builds a board from scratch with a randomized-greedy policy
(score every legal placement, draw from the best few), then asks the verifier
whether the finished position still supports the required number of moves.
Attempts end in one of three outcomes:

    SUCCESS              -> emit the puzzle
    STEPS_EXHAUSTED      -> no legal placement before the piece budget was met
    VERIFICATION_FAILED  -> budget met, but no rollout reached the target

Failed attempts are discarded and retried with fresh randomness until the
attempt ceiling is reached.
"""

import logging
import random
import string
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union

from engine.board import Board
from engine.move_generator import LegalMoveGenerator, Move
from engine.pieces import PIECE_IDS
from schemas.puzzle import Difficulty, Puzzle, PuzzleMove

from .config import GeneratorConfig
from .scoring import score_move
from .verifier import find_playable_line

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
# (board, used_pieces, moves_required, rng) -> proving line or None
Verifier = Callable[[Board, List[str], int, random.Random], Optional[List[Move]]]

_ID_ALPHABET = string.ascii_lowercase + string.digits


class AttemptOutcome(Enum):
    SUCCESS = "success"
    STEPS_EXHAUSTED = "steps_exhausted"
    VERIFICATION_FAILED = "verification_failed"


class GenerationFailure(Enum):
    """Why generate() gave up. Both reasons mean: retry with new randomness."""
    GENERATION_EXHAUSTED = "generation_exhausted"
    VERIFICATION_EXHAUSTED = "verification_exhausted"


@dataclass
class AttemptResult:
    """Outcome of one construction attempt on its own scratch board."""
    attempt: int
    outcome: AttemptOutcome
    board: Board
    used_pieces: List[str]
    solution: Optional[List[Move]] = None

    @property
    def pieces_placed(self) -> int:
        return len(self.used_pieces)


@dataclass
class GenerationResult:
    difficulty: str
    moves_remaining: int
    puzzle: Optional[Puzzle] = None
    attempts: List[AttemptResult] = field(default_factory=list)
    failure: Optional[GenerationFailure] = None

    @property
    def succeeded(self) -> bool:
        return self.puzzle is not None

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)


class PuzzleGenerator:
    """
    Builds verified puzzles for a difficulty.

    Args:
        config: Generation policy; defaults to GeneratorConfig()
        rng: Randomness source shared by construction and verification
        seed: Seed for a new rng when none is given; recorded on the puzzle
        move_generator: Legal move enumerator
        verifier: Playability check; defaults to random rollouts with
            config.verification_trials trials
    """

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None,
                 move_generator: Optional[LegalMoveGenerator] = None,
                 verifier: Optional[Verifier] = None):
        self.config = config or GeneratorConfig()
        self.seed = seed
        self.rng = rng or random.Random(seed)
        self.move_generator = move_generator or LegalMoveGenerator()
        self.verifier = verifier or self._rollout_verifier

    def _rollout_verifier(self, board: Board, used_pieces: List[str], moves_required: int,
                          rng: random.Random) -> Optional[List[Move]]:
        return find_playable_line(board, used_pieces, moves_required,
                                  trials=self.config.verification_trials, rng=rng,
                                  move_generator=self.move_generator)

    def choose_move(self, board: Board, moves: List[Move], use_heuristic: bool) -> Move:
        """Score every candidate and draw uniformly from the top_k best."""
        weights = self.config.heuristic
        scored = [(score_move(board, move, weights, self.rng, use_heuristic), move)
                  for move in moves]
        scored.sort(key=lambda item: item[0], reverse=True)
        top_moves = [move for _, move in scored[:weights.top_k]]
        return self.rng.choice(top_moves)

    def run_attempt(self, attempt: int, pieces_to_place: int, moves_remaining: int,
                    on_progress: Optional[ProgressCallback] = None) -> AttemptResult:
        """Build one board from empty and verify it."""
        piece_order = list(PIECE_IDS)
        self.rng.shuffle(piece_order)
        board = Board()
        used_pieces: List[str] = []
        heuristic_steps = pieces_to_place * self.config.heuristic.heuristic_phase

        for step in range(pieces_to_place):
            moves = self.move_generator.get_legal_moves(board, used_pieces, piece_order)
            if not moves:
                logger.debug(f"Attempt {attempt}: no legal move at step {step + 1}/{pieces_to_place}")
                return AttemptResult(attempt, AttemptOutcome.STEPS_EXHAUSTED, board, used_pieces)

            move = self.choose_move(board, moves, use_heuristic=step < heuristic_steps)
            move.apply_to(board)
            used_pieces.append(move.piece_id)
            if on_progress is not None:
                on_progress(len(used_pieces), pieces_to_place)

        solution = self.verifier(board, list(used_pieces), moves_remaining, self.rng)
        if solution is None:
            logger.debug(f"Attempt {attempt}: board with {len(used_pieces)} pieces failed verification")
            return AttemptResult(attempt, AttemptOutcome.VERIFICATION_FAILED, board, used_pieces)

        return AttemptResult(attempt, AttemptOutcome.SUCCESS, board, used_pieces, solution)

    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.EASY,
                 on_progress: Optional[ProgressCallback] = None) -> GenerationResult:
        """
        Run attempts until one succeeds or the ceiling is reached.

        Raises:
            ValueError: If the difficulty is not configured
        """
        moves_remaining = self.config.moves_for_difficulty(difficulty)
        pieces_to_place = self.config.pieces_to_place(difficulty)
        difficulty_name = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty).lower()
        result = GenerationResult(difficulty=difficulty_name, moves_remaining=moves_remaining)

        start = time.perf_counter()
        for attempt in range(1, self.config.max_attempts + 1):
            attempt_result = self.run_attempt(attempt, pieces_to_place, moves_remaining, on_progress)
            result.attempts.append(attempt_result)

            if attempt_result.outcome is AttemptOutcome.SUCCESS:
                result.puzzle = self._build_puzzle(difficulty_name, moves_remaining, attempt_result)
                elapsed = time.perf_counter() - start
                logger.info(f"Generated {difficulty_name} puzzle {result.puzzle.id} "
                            f"after {attempt} attempt(s) in {elapsed:.2f}s")
                return result

        built_full_board = any(a.outcome is AttemptOutcome.VERIFICATION_FAILED for a in result.attempts)
        result.failure = (GenerationFailure.VERIFICATION_EXHAUSTED if built_full_board
                          else GenerationFailure.GENERATION_EXHAUSTED)
        logger.warning(f"Failed to generate {difficulty_name} puzzle after "
                       f"{self.config.max_attempts} attempts ({result.failure.value})")
        return result

    def _build_puzzle(self, difficulty: str, moves_remaining: int,
                      attempt_result: AttemptResult) -> Puzzle:
        suffix = ''.join(self.rng.choice(_ID_ALPHABET) for _ in range(6))
        return Puzzle(
            id=f"puzzle-{int(time.time() * 1000)}-{suffix}",
            name=f"{difficulty.title()} Puzzle",
            difficulty=difficulty,
            description=f"{moves_remaining} moves remaining - Find the winning sequence!",
            board_state=attempt_result.board.to_string(),
            used_pieces=tuple(attempt_result.used_pieces),
            moves_remaining=moves_remaining,
            seed=self.seed,
            solution=tuple(PuzzleMove.from_move(move) for move in attempt_result.solution or []),
        )


def generate_local_puzzle(difficulty: Union[Difficulty, str] = Difficulty.EASY,
                          on_progress: Optional[ProgressCallback] = None,
                          seed: Optional[int] = None, rng: Optional[random.Random] = None,
                          config: Optional[GeneratorConfig] = None) -> Optional[Puzzle]:
    """
    Generate a verified puzzle, or None once every attempt has failed.

    Callers should treat None as retryable: a fresh call uses new randomness.
    Every difficulty needs all twelve pieces to fit in the end, so None is the
    usual result with the default verifier.
    """
    generator = PuzzleGenerator(config=config, rng=rng, seed=seed)
    return generator.generate(difficulty, on_progress).puzzle
