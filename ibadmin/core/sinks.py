"""
Record sinks.

A record sink is where the indexer puts records. MemorySink keeps them in
a dict; ShelfSink keeps them in a persistent ``shelve`` store so large
exports can be indexed without holding every record in memory.
"""

import logging
import shelve
from abc import abstractmethod
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

from ..models import Record

logger = logging.getLogger(__name__)


class RecordSink(Mapping):
    """Keyed, insert-only storage for ingested records."""

    @abstractmethod
    def put(self, key: str, record: Record) -> None:
        """Store a record under key."""

    def close(self) -> None:
        """Release any resources held by the sink."""

    def __enter__(self) -> "RecordSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemorySink(RecordSink):
    """In-memory record sink."""

    def __init__(self):
        self._records: Dict[str, Record] = {}

    def put(self, key: str, record: Record) -> None:
        self._records[key] = record

    def __getitem__(self, key: str) -> Record:
        return self._records[key]

    def __contains__(self, key) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"MemorySink({len(self._records)} records)"


class ShelfSink(RecordSink):
    """
    Record sink backed by a ``shelve`` file.

    The store is created fresh unless ``keep_existing`` is set, in which
    case new records are added alongside those from earlier runs.
    """

    def __init__(self, path: str, keep_existing: bool = False):
        self.path = path
        self._shelf: Optional[shelve.Shelf] = shelve.open(path, flag="c" if keep_existing else "n")
        logger.debug(f"Opened record store [{path}]")

    @property
    def shelf(self) -> shelve.Shelf:
        if self._shelf is None:
            raise ValueError(f"Record store [{self.path}] is closed")
        return self._shelf

    def put(self, key: str, record: Record) -> None:
        self.shelf[key] = record

    def __getitem__(self, key: str) -> Record:
        return self.shelf[key]

    def __contains__(self, key) -> bool:
        return key in self.shelf

    def __iter__(self) -> Iterator[str]:
        return iter(self.shelf)

    def __len__(self) -> int:
        return len(self.shelf)

    def close(self) -> None:
        if self._shelf is not None:
            self._shelf.close()
            self._shelf = None
            logger.debug(f"Closed record store [{self.path}]")
