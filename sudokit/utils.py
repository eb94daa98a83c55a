"""Small helpers for time display and data storage."""

from __future__ import annotations

import logging
import math
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_sudoku_dir() -> Path:
    """Return the directory for saved data, creating it when needed.

    Falls back to the home directory itself if the data directory cannot be
    created.
    """
    try:
        parent_dir = Path.home()
    except (RuntimeError, KeyError):
        parent_dir = Path("/tmp")

    sudoku_dir = parent_dir / ".sudoku"
    if sudoku_dir.exists():
        return sudoku_dir

    try:
        sudoku_dir.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        logger.warning("Falling back to parent dir (%s): %s", parent_dir, err)
        return parent_dir
    return sudoku_dir


def format_time(time_secs: float) -> str:
    """Format a number of seconds as ``minutes:seconds``."""
    minutes = math.floor(time_secs / 60)
    seconds = math.floor(time_secs - minutes * 60)
    return f"{minutes}:{seconds:02d}"