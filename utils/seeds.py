"""
Randomness-source construction for reproducible puzzle generation.
"""

import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None, log: bool = True) -> random.Random:
    """
    Create an independent random source.

    Args:
        seed: Seed for reproducible runs (None = random initialization)
        log: Whether to log the seed value

    Returns:
        A random.Random instance not shared with the global random module
    """
    if log:
        if seed is None:
            logger.info("No seed provided, using random initialization")
        else:
            logger.info(f"Seed initialized: {seed}")
    return random.Random(seed)


def derive_seed(seed: Optional[int], index: int) -> Optional[int]:
    """Seed for the index-th run of a batch, or None when the batch is unseeded."""
    if seed is None:
        return None
    return seed + index
