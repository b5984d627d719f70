"""
Delimited line parsing module.

This module tokenizes one comma-delimited line at a time. Lines exported
by IPAM tools often double and triple their quotes, so each line is
normalized before tokenizing:

1. trailing CR/LF is stripped and stray CRs removed
2. literal backticks become ``^`` so the backtick can serve as escape marker
3. a run of four quotes becomes two escaped quotes
4. a run of three quotes becomes a single quote
5. a pair of quotes becomes one escaped quote

The normalized line is then split with ``csv.reader`` using the backtick
as escape character. Quotes inside unquoted fields are kept as data
(``data,some "more" data,data``); unterminated quotes and data after a
closing quote make the line malformed.
"""

import csv
import logging
from typing import Optional

from ..constants import ESCAPE_CHAR, ESCAPE_SUBSTITUTE, QUOTE_CHAR, SEPARATOR_CHAR
from ..models import Malformed, Parsed, ParseOutcome

logger = logging.getLogger(__name__)


class RecordParser:
    """Tokenizes delimited lines into field tuples."""

    def __init__(
        self,
        separator: str = SEPARATOR_CHAR,
        quote: str = QUOTE_CHAR,
        escape: str = ESCAPE_CHAR,
        escape_substitute: str = ESCAPE_SUBSTITUTE,
    ):
        self.separator = separator
        self.quote = quote
        self.escape = escape
        self.escape_substitute = escape_substitute

    def prepare(self, raw_line: str) -> str:
        """Apply the line normalization steps, in order."""
        q, e = self.quote, self.escape
        line = raw_line.rstrip("\r\n").replace("\r", "")
        line = line.replace(e, self.escape_substitute)
        line = line.replace(q * 4, e + q + e + q)
        line = line.replace(q * 3, q)
        line = line.replace(q * 2, e + q)
        return line

    def parse(self, raw_line: str) -> Optional[ParseOutcome]:
        """
        Normalize and tokenize a raw line.

        Returns:
            None for a blank line, otherwise Parsed or Malformed
        """
        line = self.prepare(raw_line)
        if not line.strip():
            return None
        return self.tokenize(line)

    def _has_dangling_escape(self, line: str) -> bool:
        trailing = len(line) - len(line.rstrip(self.escape))
        return trailing % 2 == 1

    def tokenize(self, line: str) -> ParseOutcome:
        """Split an already normalized line into fields."""
        # csv.reader turns a trailing escape into a newline instead of failing
        if self._has_dangling_escape(line):
            return Malformed(reason=f"dangling escape at column {len(line)}", line=line)

        # doublequote stays on so a closing quote followed by data is an error
        # in strict mode; prepare() has already replaced every quote pair
        reader = csv.reader(
            [line],
            delimiter=self.separator,
            quotechar=self.quote,
            escapechar=self.escape,
            strict=True,
        )
        try:
            fields = next(reader, [])
        except csv.Error as e:
            return Malformed(reason=str(e), line=line)

        return Parsed(fields=tuple(fields))
