"""
INI-style config file reader.

The format is a flat list of ``name=value`` lines. Lines starting with
``#`` or ``;`` are comments and ``__END__`` ends the settings (anything
after it is documentation). The unlabeled part at the top of the file is
always read; ``[section]`` headers start named sections, of which at most
one is read::

    # Top of config file
    username=admin
    password=infoblox

    [dns6demo]
    grid_master=dns6demo.infoblox.com
    username=dns6_admin
"""

import logging
import os
from typing import Dict, Optional

from ..constants import COMMENT_CHARS

logger = logging.getLogger(__name__)

END_MARKER = "__END__"


def _section_name(line: str) -> Optional[str]:
    if line.startswith("[") and line.endswith("]"):
        return line[1:-1]
    return None


def read_config(
    filename: str,
    section: Optional[str] = None,
    record: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Read the global settings and optionally one named section of a config file.

    Reading stops at the first section header when no section is requested,
    and at the header following the requested section otherwise.

    Args:
        filename: Path of the config file
        section: Name of the section to read in addition to the global part
        record: Pre-existing settings, updated in place

    Returns:
        The updated settings (record unchanged if the file does not exist)
    """
    if record is None:
        record = {}

    if not os.path.exists(filename):
        logger.debug(f"Config file [{filename}] not found, skipping")
        return record

    current_section: Optional[str] = None
    found = False

    with open(filename, "r", encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.replace("\r", "").strip()

            if not line or line[0] in COMMENT_CHARS:
                continue

            if line == END_MARKER:
                break

            name = _section_name(line)
            if name is not None:
                # Did we just finish with the section we wanted?
                if found or not section:
                    break
                if name == section:
                    found = True
                current_section = name
                continue

            if current_section is not None and current_section != section:
                continue

            parts = line.split("=")
            if len(parts) > 1 and parts[1].strip() != "":
                record[parts[0].strip()] = parts[1].strip()

    logger.debug(f"Read config file [{filename}]" + (f" section [{section}]" if section else ""))
    return record
