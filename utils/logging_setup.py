"""
Logging setup utilities for puzzle generation runs.

This module provides functions to configure logging with console output and an
optional log file inside a timestamped run directory.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    log_dir: Optional[Path] = None,
    run_name: str = "generate",
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging with a console handler and, if log_dir is given, a file handler.

    Args:
        log_dir: Directory where the log file should be created (None = console only)
        run_name: Name for the log file (without extension)
        level: Logging level (default: logging.INFO)
        format_string: Optional custom format string. If None, uses default format.

    Returns:
        Path to the created log file, or None when logging to console only

    Example:
        >>> setup_logging(level=logging.DEBUG)
        >>> logging.getLogger("puzzles.generator").debug("visible on the console")
    """
    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{run_name}.log"

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return log_file


def create_run_directory(
    base_dir: Path = Path("runs"),
    experiment_name: Optional[str] = None
) -> Path:
    """
    Create a timestamped run directory.

    Directory format: <base_dir>/<YYYYMMDD>_<HHMMSS>_<experiment_name>/
    If experiment_name is None, uses "run" as default.

    Example:
        >>> run_dir = create_run_directory(experiment_name="hard_batch")
        >>> # Creates: runs/20250115_143022_hard_batch/
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{timestamp}_{experiment_name or 'run'}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def setup_generation_logging(
    base_run_dir: Path = Path("runs"),
    experiment_name: Optional[str] = None,
    level: int = logging.INFO
) -> Tuple[Path, Path]:
    """
    Create a timestamped run directory and log to both console and file.

    Returns:
        Tuple of (run_directory, log_file_path)
    """
    run_dir = create_run_directory(base_run_dir, experiment_name)
    log_file = setup_logging(run_dir, "generation", level)
    return run_dir, log_file
