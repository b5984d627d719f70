#!/usr/bin/env python3
"""
Record Models

This module contains the data structures produced by delimited-record
ingestion: tagged field values, records, schemas and per-line parse
outcomes.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterator, NamedTuple, Optional, Tuple, Union


class FieldKind(Enum):
    """Kinds of value a record field can hold."""

    TEXT = "text"
    LIST = "list"


class FieldValue(NamedTuple):
    """
    Tagged value stored in a record field.

    The kind is fixed when the value is built, so serializers never have
    to inspect the payload to decide how to render it.

    Attributes:
        kind: FieldKind.TEXT or FieldKind.LIST
        text: Payload for TEXT values
        items: Payload for LIST values
    """

    kind: FieldKind
    text: str = ""
    items: Tuple[str, ...] = ()

    @classmethod
    def of_text(cls, text: str) -> "FieldValue":
        return cls(kind=FieldKind.TEXT, text=text)

    @classmethod
    def of_list(cls, items) -> "FieldValue":
        return cls(kind=FieldKind.LIST, items=tuple(str(item) for item in items))

    @classmethod
    def coerce(cls, value: Any) -> "FieldValue":
        """Build a FieldValue from a plain str, list/tuple or FieldValue."""
        if isinstance(value, FieldValue):
            return value
        if isinstance(value, (list, tuple)):
            return cls.of_list(value)
        return cls.of_text("" if value is None else str(value))

    @property
    def is_list(self) -> bool:
        return self.kind is FieldKind.LIST

    def is_empty(self) -> bool:
        if self.is_list:
            return not self.items
        return self.text == ""

    def render(self, separator: str = ",") -> str:
        """Render the value as a single string, joining list items."""
        if self.is_list:
            return separator.join(self.items)
        return self.text

    def to_python(self) -> Union[str, list]:
        if self.is_list:
            return list(self.items)
        return self.text


class Record(Mapping):
    """
    Read-only mapping of field name to FieldValue.

    Field order follows the order the values were supplied in, which for
    ingested rows is schema order.
    """

    def __init__(self, fields: Optional[Mapping] = None, **kwargs):
        values: Dict[str, FieldValue] = {}
        for source in (fields or {}, kwargs):
            for name, value in source.items():
                values[name] = FieldValue.coerce(value)
        self._values = values

    def __getitem__(self, name: str) -> FieldValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Record({self.to_dict()!r})"

    def text(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the rendered value of a field, or default when absent."""
        value = self._values.get(name)
        if value is None:
            return default
        return value.render()

    def to_dict(self) -> Dict[str, Union[str, list]]:
        return {name: value.to_python() for name, value in self._values.items()}


class Schema(NamedTuple):
    """
    Normalized field names bound from a header line.

    Attributes:
        fields: Lower-cased field names in column order
        key_column: Field whose value indexes each record
    """

    fields: Tuple[str, ...]
    key_column: str


class Parsed(NamedTuple):
    """A line that tokenized cleanly."""

    fields: Tuple[str, ...]


class Malformed(NamedTuple):
    """A line that failed tokenization."""

    reason: str
    line: str


ParseOutcome = Union[Parsed, Malformed]
