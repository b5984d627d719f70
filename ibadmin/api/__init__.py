#!/usr/bin/env python3
"""
API package for the Infoblox administration toolkit.

This package provides grid master session management and the API
distribution download-and-extract workflow.
"""

from .client import (
    GridSession,
    create_session,
)

from .dist import (
    extract_links,
    find_api_archive,
    update_api,
    next_steps,
)

__all__ = [
    # Session management
    "GridSession",
    "create_session",
    # API distribution
    "extract_links",
    "find_api_archive",
    "update_api",
    "next_steps",
]
