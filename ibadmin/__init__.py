#!/usr/bin/env python3
"""
Infoblox Administration Toolkit

A Python package for administering Infoblox grid masters: reading CSV
exports into keyed record indexes, layered configuration, grid master
sessions and API distribution updates.

This package provides both a command-line interface and a programmatic API.
"""

from ._version import __version__, __author__, __description__, __license__

# Import models for public API
from .models import (
    FieldValue,
    Record,
    Schema,
    IngestSettings,
    IngestResult,
    UpdatePlan,
)

# Import exceptions for public API
from .exceptions import (
    IbAdminError,
    SourceUnavailable,
    ConfigError,
    SessionError,
    DownloadError,
)

# Import core functionality for public API
from .core import (
    RecordParser,
    MemorySink,
    ShelfSink,
    ingest,
    ingest_file,
    ingest_file_to_shelf,
    write_csv_file,
)

# Import configuration for public API
from .config import (
    ConfigSchema,
    ConfigLoader,
    read_config,
)

# Import API functions for public API
from .api import (
    create_session,
    update_api,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
    debug_print,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "FieldValue",
    "Record",
    "Schema",
    "IngestSettings",
    "IngestResult",
    "UpdatePlan",
    # Exceptions
    "IbAdminError",
    "SourceUnavailable",
    "ConfigError",
    "SessionError",
    "DownloadError",
    # Core functionality
    "RecordParser",
    "MemorySink",
    "ShelfSink",
    "ingest",
    "ingest_file",
    "ingest_file_to_shelf",
    "write_csv_file",
    # Configuration
    "ConfigSchema",
    "ConfigLoader",
    "read_config",
    # API functions
    "create_session",
    "update_api",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
    "debug_print",
]
