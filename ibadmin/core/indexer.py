"""
Header binding and record indexing.

HeaderBinder turns the first parsed line into a lower-cased Schema.
RecordIndexer binds every later line to that Schema and stores it in a
record sink under the value of the key column, suffixing the line number
when the key is already taken.
"""

import logging
from typing import Optional, Sequence

from ..constants import KEY_SUFFIX_SEPARATOR
from ..models import Record, Schema
from .sinks import RecordSink

logger = logging.getLogger(__name__)


class HeaderBinder:
    """Builds the Schema from a header line."""

    @staticmethod
    def bind(fields: Sequence[str], key_column: Optional[str] = None) -> Schema:
        """
        Lower-case the header fields and choose the key column.

        Args:
            fields: Field values of the header line
            key_column: Explicit key column name; defaults to the first column

        Returns:
            The bound Schema
        """
        names = tuple(field.lower() for field in fields)
        if key_column:
            key = key_column.lower()
        else:
            key = names[0] if names else ""
        return Schema(fields=names, key_column=key)


class RecordIndexer:
    """Binds parsed lines to a Schema and inserts them into a sink."""

    def __init__(self, schema: Schema, sink: RecordSink):
        self.schema = schema
        self.sink = sink
        self.dropped = 0

    def build_record(self, fields: Sequence[str]) -> Record:
        """
        Zip the schema against field values positionally.

        Extra values are ignored; schema fields past the end of the line
        are left out of the record.
        """
        return Record(dict(zip(self.schema.fields, fields)))

    def make_key(self, key: str, line_no: int) -> str:
        """Return a key that is not yet present in the sink."""
        while key in self.sink:
            key = f"{key}{KEY_SUFFIX_SEPARATOR}{line_no}"
        return key

    def index(self, fields: Sequence[str], line_no: int) -> Optional[str]:
        """
        Insert a parsed line.

        Args:
            fields: Field values of the line
            line_no: 1-based physical line number, used to disambiguate keys

        Returns:
            The key the record was stored under, or None if it was dropped
        """
        record = self.build_record(fields)
        value = record.get(self.schema.key_column)
        if value is None:
            self.dropped += 1
            return None

        key = self.make_key(value.render(), line_no)
        self.sink.put(key, record)
        return key
