"""
Logging utilities for the Infoblox administration toolkit.

This module provides centralized logging configuration and the leveled
debug printer used by ingestion, configuration and the CLI. Debug levels
follow the scheme in ``ibadmin.constants``: a message is emitted only when
the caller's verbosity is at least the message level.
"""

import logging
import os
import time
from collections.abc import Mapping
from typing import Any, Optional

from ..constants import (
    DEBUG_ERROR,
    DEBUG_WARNING,
    DEBUG_PROGRESS_INDICATOR,
    DEBUG_INFO,
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    debug: int = 0,
    log_to_file: bool = False,
    log_file: Optional[str] = None,
) -> Optional[str]:
    """
    Setup logging configuration with appropriate level, format and handlers.

    Args:
        debug: Configured debug level; INFO and above switches to DEBUG records
        log_to_file: Also write log records to a timestamped file
        log_file: Explicit log file name (defaults to get_log_filename())

    Returns:
        The log file path when file logging is enabled, otherwise None
    """
    level = logging.DEBUG if debug >= DEBUG_INFO else logging.INFO
    handlers = [logging.StreamHandler()]

    if log_to_file:
        log_file = log_file or get_log_filename()
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )

    # Set specific logger levels
    logging.getLogger("urllib3").setLevel(logging.WARNING)  # Reduce HTTP client noise
    logging.getLogger("requests").setLevel(logging.WARNING)

    return log_file if log_to_file else None


def get_log_filename(script: str = "ibadmin", now: Optional[float] = None) -> str:
    """
    Build a timestamped log file name for a script.

    The result looks like ``ibadmin.20240131.235959.log``. An existing file
    with the same name is removed.
    """
    base = script[:-3] if script.endswith(".py") else script
    stamp = time.strftime("%Y%m%d.%H%M%S", time.localtime(now))
    filename = f"{base}.{stamp}.log"

    if os.path.exists(filename):
        os.remove(filename)

    return filename


def format_message(message: Any, *extra: Any) -> str:
    """
    Render a debug message.

    Mappings render as ``[key=value], [key=value]`` in sorted key order with
    list values joined by commas; anything else is converted with str().
    """
    if isinstance(message, Mapping):
        parts = []
        for key in sorted(message):
            parts.append(f"[{key}={_render_value(message[key])}]")
        text = ", ".join(parts)
    else:
        text = str(message)

    if extra:
        text = text + " " + " ".join(str(item) for item in extra)
    return text


def _render_value(value: Any) -> str:
    render = getattr(value, "render", None)
    if callable(render):
        return render()
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def _record_level(level: int) -> int:
    """Map a debug level onto a standard logging level."""
    if level <= DEBUG_ERROR:
        return logging.ERROR
    if level == DEBUG_WARNING:
        return logging.WARNING
    if level == DEBUG_PROGRESS_INDICATOR:
        return logging.INFO
    return logging.DEBUG


def debug_print(
    level: int,
    label: str,
    message: Any,
    *extra: Any,
    verbosity: int = 0,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Emit a labelled message if verbosity meets the message level.

    Args:
        level: Debug level the message belongs to
        label: Short label, padded to six characters ("DEBUG" when empty)
        message: Text or mapping to render
        *extra: Additional values appended to the message
        verbosity: The caller's configured debug level
        logger: Logger instance to use (defaults to this module's logger)

    Returns:
        True if the message was emitted
    """
    if verbosity < level:
        return False

    if logger is None:
        logger = logging.getLogger(__name__)

    label = f"{label or 'DEBUG':<6} [{level:02d}]"
    logger.log(_record_level(level), f"{label}:  {format_message(message, *extra)}")
    return True
