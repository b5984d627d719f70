#!/usr/bin/env python3
"""
CLI package for the Infoblox administration toolkit.

This package provides command-line interface components including
argument parsing and the command handlers.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
    update_api_main,
)

__all__ = [
    # Argument parsing
    "create_argument_parser",
    # Main application flow
    "main",
    "update_api_main",
]
