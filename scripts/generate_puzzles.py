"""
Batch puzzle generation from the command line.

Usage:
    python scripts/generate_puzzles.py --difficulty hard --count 5 --seed 7
    python scripts/generate_puzzles.py --config generator.yaml --output puzzles.json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles.config import GeneratorConfig
from puzzles.generator import PuzzleGenerator
from schemas.puzzle import Difficulty, Puzzle
from utils.logging_setup import setup_generation_logging, setup_logging
from utils.seeds import derive_seed, make_rng

logger = logging.getLogger(__name__)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser for the generation script."""
    parser = argparse.ArgumentParser(
        description="Generate verified Deadblock puzzles",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="Puzzle difficulty tier"
    )
    parser.add_argument("--count", type=int, default=1, help="Number of puzzles to generate")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed (None = random)")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML or JSON generator config file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write puzzles as a JSON array to this file instead of stdout"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Also log to a timestamped run directory under this path"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser


def generate_batch(difficulty: str, count: int, seed: Optional[int],
                   config: GeneratorConfig) -> List[Puzzle]:
    """Generate up to `count` puzzles, skipping runs that exhaust their attempts."""
    puzzles = []
    for index in range(count):
        run_seed = derive_seed(seed, index)
        generator = PuzzleGenerator(config=config, rng=make_rng(run_seed), seed=run_seed)
        result = generator.generate(difficulty)
        if result.succeeded:
            puzzles.append(result.puzzle)
        else:
            logger.warning(f"Puzzle {index + 1}/{count} failed: {result.failure.value}")
    return puzzles


def main(argv: Optional[List[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO

    if args.log_dir:
        run_dir, log_file = setup_generation_logging(Path(args.log_dir), args.difficulty, level)
        logger.info(f"Logging to {log_file}")
    else:
        setup_logging(level=level)

    config = GeneratorConfig.from_file(Path(args.config)) if args.config else GeneratorConfig()
    config.log_config(logger)

    puzzles = generate_batch(args.difficulty, args.count, args.seed, config)
    payload = json.dumps([puzzle.model_dump(mode="json") for puzzle in puzzles], indent=2)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        logger.info(f"Wrote {len(puzzles)} puzzle(s) to {args.output}")
    else:
        print(payload)

    logger.info(f"Generated {len(puzzles)}/{args.count} {args.difficulty} puzzle(s)")
    return 0 if len(puzzles) == args.count else 1


if __name__ == "__main__":
    sys.exit(main())
