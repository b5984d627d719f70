"""
Delimited file ingestion module.

This module reads a comma-delimited export into a keyed index of records.
The first parsed line is the header; every later line becomes a Record
stored under the value of the key column (the first column unless one is
given). Malformed lines are logged, counted and skipped.
"""

import logging
import os
from typing import Iterable, Optional

from ..constants import DEBUG_INFO, DEBUG_READ_LINE, DEBUG_WARNING
from ..exceptions import SourceUnavailable
from ..models import IngestResult, IngestSettings, Malformed, Schema
from ..utils.files import count_lines
from ..utils.logging import debug_print
from .indexer import HeaderBinder, RecordIndexer
from .parser import RecordParser
from .progress import ProgressReporter
from .sinks import MemorySink, RecordSink, ShelfSink

logger = logging.getLogger(__name__)


def ingest(
    source: Iterable[str],
    key_column: Optional[str] = None,
    settings: Optional[IngestSettings] = None,
    total_lines: Optional[int] = None,
    sink: Optional[RecordSink] = None,
    source_name: str = "<stream>",
) -> IngestResult:
    """
    Ingest an open text stream of delimited lines.

    The caller owns the stream and is responsible for closing it.

    Args:
        source: Open readable text stream (any iterable of lines)
        key_column: Column whose value keys each record; first column if omitted
        settings: Verbosity and progress interval for this call
        total_lines: Known line count of the source, used for progress percentages
        sink: Record sink to fill (a new MemorySink by default)
        source_name: Name used in log messages

    Returns:
        IngestResult whose index is the filled sink
    """
    settings = settings or IngestSettings()
    sink = sink if sink is not None else MemorySink()
    verbosity = settings.verbosity

    parser = RecordParser()
    progress = ProgressReporter(
        total_items=total_lines,
        report_every=settings.report_every,
        verbosity=verbosity,
    )

    schema: Optional[Schema] = None
    indexer: Optional[RecordIndexer] = None
    line_no = 0
    bad_records = 0
    blank_lines = 0

    for raw_line in source:
        line_no += 1
        outcome = parser.parse(raw_line)

        if outcome is None:
            blank_lines += 1
        elif isinstance(outcome, Malformed):
            debug_print(DEBUG_WARNING, "REJECT", f"Bad data [{outcome.line}]",
                        verbosity=verbosity, logger=logger)
            debug_print(DEBUG_WARNING, "ERROR", f"parse failed on line {line_no}: {outcome.reason}",
                        verbosity=verbosity, logger=logger)
            bad_records += 1
        elif schema is None:
            # The first parsed row is the column list
            schema = HeaderBinder.bind(outcome.fields, key_column)
            indexer = RecordIndexer(schema, sink)
        else:
            key = indexer.index(outcome.fields, line_no)
            # Only read the record back when it will be printed
            if key is not None and verbosity >= DEBUG_READ_LINE:
                debug_print(DEBUG_READ_LINE, "LINE", sink[key],
                            verbosity=verbosity, logger=logger)

        progress.update(line_no)

    debug_print(
        DEBUG_INFO,
        "READ",
        f"[{line_no}] line(s), [{bad_records}] were rejected, from [{source_name}]",
        verbosity=verbosity,
        logger=logger,
    )

    return IngestResult(
        index=sink,
        schema=schema,
        lines_read=line_no,
        rejected_lines=bad_records,
        blank_lines=blank_lines,
        dropped_lines=indexer.dropped if indexer else 0,
        source=source_name,
    )


def _open_source(filename: str):
    # Split on LF only; prepare() strips CRs, including stray ones mid-line
    try:
        return open(filename, "r", encoding="utf-8", newline="\n")
    except OSError as e:
        logger.error(f"Unable to open [{filename}] for reading: {e}")
        raise SourceUnavailable(filename, str(e)) from e


def _is_empty(filename: str) -> bool:
    try:
        return os.path.getsize(filename) == 0
    except OSError as e:
        raise SourceUnavailable(filename, str(e)) from e


def ingest_file(
    filename: str,
    key_column: Optional[str] = None,
    settings: Optional[IngestSettings] = None,
    sink: Optional[RecordSink] = None,
) -> IngestResult:
    """
    Read a delimited file into a keyed index of records.

    Args:
        filename: Path to the file to read
        key_column: Column whose value keys each record; first column if omitted
        settings: Verbosity and progress interval for this call
        sink: Record sink to fill (a new MemorySink by default)

    Returns:
        IngestResult with the indexed records and line counters

    Raises:
        SourceUnavailable: If the file does not exist or cannot be opened
        UnicodeDecodeError: If the file can't be decoded as UTF-8
    """
    settings = settings or IngestSettings()
    sink = sink if sink is not None else MemorySink()

    if _is_empty(filename):
        debug_print(DEBUG_WARNING, "NOTICE", f"File [{filename}] is empty.",
                    verbosity=settings.verbosity, logger=logger)
        return IngestResult(index=sink, schema=None, source=filename)

    debug_print(DEBUG_INFO, "FILE", f"reading from file [{filename}]",
                verbosity=settings.verbosity, logger=logger)
    total_lines = count_lines(filename)

    with _open_source(filename) as f:
        return ingest(
            f,
            key_column=key_column,
            settings=settings,
            total_lines=total_lines,
            sink=sink,
            source_name=filename,
        )


def ingest_file_to_shelf(
    filename: str,
    key_column: Optional[str] = None,
    settings: Optional[IngestSettings] = None,
    store_path: Optional[str] = None,
) -> IngestResult:
    """
    Read a delimited file into a persistent shelve store.

    The store defaults to ``<filename>.dat``. The returned index is an open
    ShelfSink; the caller closes it when done.
    """
    if not os.path.exists(filename):
        raise SourceUnavailable(filename, "No such file or directory")

    sink = ShelfSink(store_path or f"{filename}.dat")
    try:
        return ingest_file(filename, key_column=key_column, settings=settings, sink=sink)
    except Exception:
        sink.close()
        raise
