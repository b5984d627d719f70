"""
Progress tracking and reporting components.

This module provides the reporter that emits periodic status lines while
large files are read or written.
"""

import logging
from typing import Optional

from ..constants import DEBUG_PROGRESS_INDICATOR, DEFAULT_REPORT_EVERY
from ..utils.logging import debug_print

logger = logging.getLogger(__name__)


class ProgressReporter:
    """
    Reports progress every N records and at the final record.

    Reporting is a no-op unless verbosity reaches the progress level.
    """

    def __init__(
        self,
        total_items: Optional[int] = None,
        report_every: int = DEFAULT_REPORT_EVERY,
        verbosity: int = 0,
        level: int = DEBUG_PROGRESS_INDICATOR,
    ):
        """
        Initialize progress reporter.

        Args:
            total_items: Total number of items, None or 0 when unknown
            report_every: Emit a status line every N items (default 2500)
            verbosity: The caller's configured debug level
            level: Debug level progress lines are emitted at
        """
        self.total_items = total_items or 0
        self.report_every = max(1, report_every)
        self.verbosity = verbosity
        self.level = level

    @property
    def enabled(self) -> bool:
        return self.verbosity >= self.level

    def should_report(self, current: int) -> bool:
        """Return True when current is a multiple of the interval or the final item."""
        if current % self.report_every == 0:
            return True
        return bool(self.total_items) and current == self.total_items

    def format_status(self, current: int) -> str:
        if self.total_items:
            percent = int(current / self.total_items * 100)
            return (
                f"processed record [#{current}] of [{self.total_items}], "
                f"[{percent}%] complete"
            )
        return f"processed record [#{current}]"

    def update(self, current: int) -> Optional[str]:
        """
        Report progress for the item just processed.

        Args:
            current: Count of items processed so far

        Returns:
            The status line that was emitted, or None
        """
        if not self.enabled or not self.should_report(current):
            return None

        message = self.format_status(current)
        debug_print(
            self.level,
            "------",
            message,
            verbosity=self.verbosity,
            logger=logger,
        )
        return message
