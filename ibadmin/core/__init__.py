#!/usr/bin/env python3
"""
Core package for the Infoblox administration toolkit.

This package provides delimited-record ingestion: line parsing, header
binding, record indexing into pluggable sinks, progress reporting and
CSV output.
"""

from .parser import (
    RecordParser,
)

from .indexer import (
    HeaderBinder,
    RecordIndexer,
)

from .progress import (
    ProgressReporter,
)

from .sinks import (
    RecordSink,
    MemorySink,
    ShelfSink,
)

from .ingest import (
    ingest,
    ingest_file,
    ingest_file_to_shelf,
)

from .output import (
    build_row,
    write_csv_file,
)

__all__ = [
    # Line parsing
    "RecordParser",
    # Indexing
    "HeaderBinder",
    "RecordIndexer",
    "RecordSink",
    "MemorySink",
    "ShelfSink",
    # Progress
    "ProgressReporter",
    # Ingestion
    "ingest",
    "ingest_file",
    "ingest_file_to_shelf",
    # Output generation
    "build_row",
    "write_csv_file",
]
