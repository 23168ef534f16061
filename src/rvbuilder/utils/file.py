"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def remove_file(file_path: Path) -> bool:
    """Delete a file, ignoring a missing one.

    Args:
        file_path: Path to delete

    Returns:
        True if a file was removed
    """
    try:
        file_path.unlink()
    except FileNotFoundError:
        return False
    logger.debug("Removed file: %s", file_path)
    return True
