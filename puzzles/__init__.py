"""
Deadblock puzzle generation.

- Generator configuration and heuristic weights
- Placement scoring
- Monte Carlo playability verification
- Randomized-greedy puzzle generator
- Built-in puzzle catalog
"""

from .catalog import CATALOG_PUZZLES, get_catalog_puzzle, parse_puzzle_board
from .config import GeneratorConfig, HeuristicWeights
from .generator import (
    AttemptOutcome, AttemptResult, GenerationFailure, GenerationResult,
    PuzzleGenerator, generate_local_puzzle,
)
from .verifier import find_playable_line, verify_puzzle_playable

__all__ = [
    'CATALOG_PUZZLES', 'get_catalog_puzzle', 'parse_puzzle_board',
    'GeneratorConfig', 'HeuristicWeights',
    'AttemptOutcome', 'AttemptResult', 'GenerationFailure', 'GenerationResult',
    'PuzzleGenerator', 'generate_local_puzzle',
    'find_playable_line', 'verify_puzzle_playable',
]
