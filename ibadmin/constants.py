#!/usr/bin/env python3
"""
Application Constants

This module contains the debug levels, defaults and exit codes used
throughout the Infoblox administration toolkit.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C

# Debug levels, a message prints when the configured debug level is >= its level
DEBUG_ERROR = 0
DEBUG_WARNING = 1
DEBUG_PROGRESS_INDICATOR = 2
DEBUG_INFO = 3
DEBUG_WRITE_FILE = 4
DEBUG_WRITE_LINE = 5
DEBUG_READ_LINE = 6
DEBUG = 99

# Delimited-record parsing
SEPARATOR_CHAR = ","
QUOTE_CHAR = '"'
ESCAPE_CHAR = "`"
ESCAPE_SUBSTITUTE = "^"  # literal backticks in data are rewritten to this
COMMENT_CHARS = "#;"
KEY_SUFFIX_SEPARATOR = "-"

# Progress reporting
DEFAULT_REPORT_EVERY = 2500

# Grid master defaults
DEFAULT_GRID_MASTER = "192.168.1.2"
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "infoblox"
DEFAULT_WAPI_VERSION = "v2.12"
DEFAULT_TIMEOUT = 10  # seconds

# API distribution download
DEFAULT_API_PATH = "/api/dist/CPAN/authors/id/INFOBLOX/"
DEFAULT_TEMP_DIR = "/tmp/"
API_ARCHIVE_PATTERN = r"^Infoblox.*.tar.gz$"
API_ARCHIVE_SUFFIX = ".tar.gz"

# Config file discovery
DEFAULT_CONFIG_FILE = "ibadmin.conf"
FALLBACK_CONFIG_FILE = "default.conf"
ENV_PREFIX = "IBADMIN_"
