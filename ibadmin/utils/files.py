"""
File system helpers.

This module provides line counting and directory/file creation used by
ingestion and the API distribution updater.
"""

import logging
import os

logger = logging.getLogger(__name__)


def count_lines(filename: str) -> int:
    """
    Count the lines in a file.

    Args:
        filename: Path to the file

    Returns:
        Number of lines, 0 if the file does not exist or cannot be read
    """
    num_lines = 0
    if os.path.exists(filename):
        try:
            with open(filename, "rb") as f:
                for _ in f:
                    num_lines += 1
        except OSError as e:
            logger.warning(f"count_lines: Unable to read '{filename}': {e}")
            return 0

    logger.debug(f"count_lines: Counted {num_lines} in file '{filename}'")
    return num_lines


def create_dir(directory: str) -> bool:
    """Create a directory (and parents) if it does not exist; return success."""
    if os.path.isdir(directory):
        logger.debug(f"directory [{directory}] already exists")
        return True

    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create directory [{directory}]: {e}")
        return False

    logger.debug(f"created directory [{directory}]")
    return True


def create_file(filename: str, text_data: str) -> None:
    """Create (or truncate) a file holding text_data, such as a header row."""
    logger.debug(f"Creating file [{filename}]")
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text_data)
