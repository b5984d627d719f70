#!/usr/bin/env python3
"""
API Distribution Models

This module contains the data structure describing the outcome of the
API distribution download-and-extract workflow.
"""

from typing import NamedTuple


class UpdatePlan(NamedTuple):
    """
    State of the API distribution on the local system.

    Attributes:
        url: Directory listing URL on the grid master
        file_name: Name of the API archive found in the listing
        full_path: Download URL of the archive
        temp_dir: Local directory the archive is placed in
        output_file: Local path of the downloaded archive
        api_dir: Directory the archive unpacks into
        is_downloaded: Whether the archive is present locally
        is_extracted: Whether the archive has been unpacked
    """

    url: str
    file_name: str
    full_path: str
    temp_dir: str
    output_file: str
    api_dir: str
    is_downloaded: bool = False
    is_extracted: bool = False
