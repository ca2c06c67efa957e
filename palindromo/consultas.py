"""
Query log: one human-readable line per palindrome check.

The file is append-only and never read back by the service.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union

from .models import QueryResult


class QueryLog(Protocol):
    def append(self, word: str, is_palindrome: bool) -> None:
        """Record one query. Raises OSError when the line can't be written."""
        ...


class FileQueryLog:
    """Append lines to a UTF-8 text file, creating it if missing."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, word: str, is_palindrome: bool) -> None:
        line = QueryResult(word=word, is_palindrome=is_palindrome).log_line()
        # single write per line so concurrent appends don't interleave
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line)
