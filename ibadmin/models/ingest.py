#!/usr/bin/env python3
"""
Ingestion Models

This module contains the settings passed into an ingestion call and the
result it hands back to the caller.
"""

from typing import Any, NamedTuple, Optional

from ..constants import DEBUG_ERROR, DEFAULT_REPORT_EVERY
from .record import Schema


class IngestSettings(NamedTuple):
    """
    Explicit settings for a single ingestion call.

    Attributes:
        verbosity: Debug level; progress is reported at level 2 and above
        report_every: Emit progress every N lines
    """

    verbosity: int = DEBUG_ERROR
    report_every: int = DEFAULT_REPORT_EVERY


class IngestResult(NamedTuple):
    """
    Result of ingesting a delimited file.

    Attributes:
        index: Record sink holding the keyed records (the result index)
        schema: Schema bound from the header, None for an empty source
        lines_read: Physical lines consumed, including header and blanks
        rejected_lines: Lines that failed tokenization
        blank_lines: Blank lines skipped
        dropped_lines: Records dropped because the key column had no value
        source: Name of the source that was read
    """

    index: Any
    schema: Optional[Schema]
    lines_read: int = 0
    rejected_lines: int = 0
    blank_lines: int = 0
    dropped_lines: int = 0
    source: str = "<stream>"

    @property
    def record_count(self) -> int:
        return len(self.index)
