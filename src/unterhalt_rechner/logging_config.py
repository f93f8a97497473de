"""Logging configuration for the CLI.

Level comes from the LOG_LEVEL environment variable (default: WARNING, so
tables are not interleaved with log lines). --verbose forces DEBUG.
Log lines go to stderr; an optional log file receives the same records.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Map string level names to logging constants
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(default: int = logging.WARNING) -> int:
    """Get logging level from LOG_LEVEL environment variable."""
    level_str = os.getenv("LOG_LEVEL", "").upper()
    return LOG_LEVEL_MAP.get(level_str, default)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        verbose: Log at DEBUG regardless of LOG_LEVEL.
        log_file: Also write records to this file.
    """
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_level = logging.DEBUG if verbose else get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Remove any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
