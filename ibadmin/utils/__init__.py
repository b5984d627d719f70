"""
Utilities module for the Infoblox administration toolkit.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and leveled debug output
- Network helpers for IPv4 mask and MAC conversions
- Text helpers for trimming and list de-duplication
- File helpers for line counting and directory/file creation
"""

# Logging utilities
from .logging import setup_logging, debug_print, format_message, get_log_filename

# Network helpers
from .network import (
    convert_bits_to_mask,
    convert_mask_to_bits,
    convert_ip_to_number,
    convert_number_to_ip,
    decimal_to_mac,
)

# Text and file helpers
from .text import trim, ltrim, rtrim, is_numeric, make_list_unique
from .files import count_lines, create_dir, create_file

__all__ = [
    "setup_logging",
    "debug_print",
    "format_message",
    "get_log_filename",
    "convert_bits_to_mask",
    "convert_mask_to_bits",
    "convert_ip_to_number",
    "convert_number_to_ip",
    "decimal_to_mac",
    "trim",
    "ltrim",
    "rtrim",
    "is_numeric",
    "make_list_unique",
    "count_lines",
    "create_dir",
    "create_file",
]
