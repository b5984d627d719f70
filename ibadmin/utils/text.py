"""
Text processing utilities.

Small string helpers shared by the config reader, CSV writer and CLI.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Union

_NATURAL_NUMBER = re.compile(r"^\d+$")


def ltrim(text: str) -> str:
    return text.lstrip()


def rtrim(text: str) -> str:
    return text.rstrip()


def trim(text: str) -> str:
    return text.strip()


def is_numeric(value) -> bool:
    """Return True for natural numbers (0 or greater) written as digits."""
    return bool(_NATURAL_NUMBER.match(str(value)))


def make_list_unique(
    items: Iterable[str],
    separator: str = ",",
    as_list: bool = False,
) -> Union[str, List[str]]:
    """
    Merge items into a sorted list of unique values.

    Items may themselves hold several separator-delimited values; they are
    joined, re-split and de-duplicated. Empty values are dropped.

    Args:
        items: Values to merge
        separator: Delimiter used to join and split values (default ",")
        as_list: Return a list instead of a joined string

    Returns:
        Sorted unique values, joined with separator unless as_list is set
    """
    separator = separator or ","
    combined = separator.join(items)
    unique = sorted({value for value in combined.split(separator) if value != ""})

    if as_list:
        return unique
    return separator.join(unique)
