"""
Puzzle generation configuration.

Policy constants (attempt ceilings, candidate pool size, heuristic weights and
the difficulty mapping) live here so they can be tuned without touching the
search loop. Configuration can be loaded from YAML or JSON files.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Union

import yaml

from engine.pieces import TOTAL_PIECES
from schemas.puzzle import Difficulty

DEFAULT_MOVES_REMAINING: Dict[str, int] = {
    Difficulty.EASY.value: 3,
    Difficulty.MEDIUM.value: 5,
    Difficulty.HARD.value: 7,
}


@dataclass
class HeuristicWeights:
    """
    Weights for scoring candidate placements during generation.

    Attributes:
        center_weight: Multiplier on the summed Manhattan distance of the
            footprint cells to the board center (negative pulls pieces inward)
        open_space_weight: Multiplier on the number of empty cells orthogonally
            adjacent to the footprint
        jitter: Upper bound of the uniform random term added to every score
        top_k: Size of the best-scoring pool the move is drawn from
        heuristic_phase: Fraction of placement steps during which the weights
            apply; later steps are scored by jitter alone
    """

    center_weight: float = -2.0
    open_space_weight: float = 3.0
    jitter: float = 10.0
    top_k: int = 10
    heuristic_phase: float = 0.5

    def __post_init__(self):
        if self.jitter < 0:
            raise ValueError(f"jitter must be non-negative, got {self.jitter}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.top_k}")
        if not 0.0 <= self.heuristic_phase <= 1.0:
            raise ValueError(f"heuristic_phase must be in [0, 1], got {self.heuristic_phase}")


@dataclass
class GeneratorConfig:
    """
    Structured puzzle generator configuration.

    Attributes:
        max_attempts: Generation attempts before giving up
        verification_trials: Rollout trials per verification
        moves_remaining: Difficulty name -> further moves the puzzle must support
        heuristic: Placement scoring weights
    """

    max_attempts: int = 50
    verification_trials: int = 30
    moves_remaining: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_MOVES_REMAINING))
    heuristic: HeuristicWeights = field(default_factory=HeuristicWeights)

    def __post_init__(self):
        if isinstance(self.heuristic, dict):
            self.heuristic = HeuristicWeights(**self.heuristic)
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.verification_trials < 1:
            raise ValueError(f"verification_trials must be at least 1, got {self.verification_trials}")
        for name, moves in self.moves_remaining.items():
            if not 1 <= moves <= TOTAL_PIECES:
                raise ValueError(f"moves_remaining[{name!r}] must be in [1, {TOTAL_PIECES}], got {moves}")

    def moves_for_difficulty(self, difficulty: Union[Difficulty, str]) -> int:
        """Further moves a puzzle of this difficulty must support."""
        key = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty).lower()
        if key not in self.moves_remaining:
            raise ValueError(f"Unknown difficulty: {difficulty!r} (known: {sorted(self.moves_remaining)})")
        return self.moves_remaining[key]

    def pieces_to_place(self, difficulty: Union[Difficulty, str]) -> int:
        return TOTAL_PIECES - self.moves_for_difficulty(difficulty)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "GeneratorConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "GeneratorConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: Path):
        """Save config to YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.to_dict()

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("=" * 60)
        logger.info("Puzzle Generator Configuration")
        logger.info("=" * 60)
        logger.info(f"Max Attempts: {self.max_attempts}")
        logger.info(f"Verification Trials: {self.verification_trials}")
        logger.info(f"Moves Remaining: {self.moves_remaining}")
        logger.info(f"Center Weight: {self.heuristic.center_weight}")
        logger.info(f"Open Space Weight: {self.heuristic.open_space_weight}")
        logger.info(f"Jitter: {self.heuristic.jitter}")
        logger.info(f"Top K: {self.heuristic.top_k}")
        logger.info(f"Heuristic Phase: {self.heuristic.heuristic_phase}")
        logger.info("=" * 60)
