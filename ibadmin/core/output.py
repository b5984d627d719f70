"""
Output formatting module.

This module writes a keyed record index back out as CSV.
"""

import csv
import logging
from typing import List, Mapping, Optional, Sequence, Union

from ..constants import DEBUG_INFO, DEBUG_WRITE_LINE
from ..models import FieldValue, IngestSettings
from ..utils.logging import debug_print
from .progress import ProgressReporter

logger = logging.getLogger(__name__)


def _split_fields(fields: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(fields, str):
        return fields.split()
    return list(fields)


def build_row(field_list: Sequence[str], record: Mapping) -> List[str]:
    """
    Build the CSV cells for one record.

    When the first requested field is not a populated column of the record,
    its label is written as the first cell instead. Missing or empty fields
    become empty cells and list values are joined with commas.
    """
    fields = list(field_list)
    row: List[str] = []

    if fields and _is_blank(record.get(fields[0])):
        row.append(fields.pop(0))

    for name in fields:
        value = record.get(name)
        if _is_blank(value):
            row.append("")
        else:
            row.append(FieldValue.coerce(value).render())
    return row


def _is_blank(value) -> bool:
    return value is None or FieldValue.coerce(value).is_empty()


def write_csv_file(
    filename: str,
    fields: Union[str, Sequence[str]],
    index: Mapping[str, Mapping],
    settings: Optional[IngestSettings] = None,
) -> int:
    """
    Append selected fields of every record in an index to a CSV file.

    The block starts with a commented header row (``#field1,field2``),
    lists records in sorted key order and ends with a blank line.

    Args:
        filename: Path of the file to append to
        fields: Field names, as a list or a space separated string
        index: Mapping of key to record
        settings: Verbosity and progress interval

    Returns:
        Number of records written
    """
    settings = settings or IngestSettings()
    field_list = _split_fields(fields)
    progress = ProgressReporter(
        total_items=len(index),
        report_every=settings.report_every,
        verbosity=settings.verbosity,
    )

    debug_print(DEBUG_INFO, "FILE", f"writing file [{filename}]",
                verbosity=settings.verbosity, logger=logger)

    written = 0
    try:
        with open(filename, "a", encoding="utf-8", newline="") as f:
            f.write("#" + ",".join(field_list) + "\n")
            writer = csv.writer(f, lineterminator="\n")

            for key in sorted(index):
                row = build_row(field_list, index[key])
                writer.writerow(row)
                written += 1
                debug_print(DEBUG_WRITE_LINE, "LINE", ",".join(row),
                            verbosity=settings.verbosity, logger=logger)
                progress.update(written)

            f.write("\n")
    except OSError as e:
        logger.error(f"Failed to write CSV output to {filename}: {e}")
        raise

    return written
