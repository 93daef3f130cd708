"""Grocery frequency tracker: tallies item names read from a line-oriented file.

The tracker owns the frequency table for its whole lifetime. The table is
filled by `load` and only read afterwards by lookups, renderers and the
backup writer.
"""

from __future__ import annotations

import logging
import os
import string
from typing import Dict, Iterable, List, Optional, Tuple, Union

from src.core.config import get_settings
from src.groceries.formatting import render_backup, render_histogram, render_listing, histogram_lines

PathLike = Union[str, "os.PathLike[str]"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class TrackerError(RuntimeError):
    pass


class SourceUnavailable(TrackerError):
    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Could not open {source}")


class SinkUnavailable(TrackerError):
    def __init__(self, sink: str):
        self.sink = sink
        super().__init__(f"Could not create backup file {sink}")


def normalize(text: str) -> str:
    """Lowercase ASCII letters only; every other character is kept as is."""
    return text.translate(_ASCII_LOWER)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class FrequencyTracker:
    def __init__(self, *, backup_file: Optional[str] = None, encoding: Optional[str] = None):
        cfg = get_settings()
        self.backup_file = backup_file or cfg.backup_file
        self.encoding = encoding or cfg.file_encoding
        self._counts: Dict[str, int] = {}
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._counts)

    def _tally(self, item: str) -> None:
        key = normalize(item)
        self._counts[key] = self._counts.get(key, 0) + 1

    def load_lines(self, lines: Iterable[str]) -> int:
        """Tally every non-empty line; returns how many lines were counted.

        Only one trailing LF or CRLF is removed; a lone CR inside a line is
        part of the item. A line made of spaces is an item.
        """
        counted = 0
        for raw in lines:
            line = _strip_terminator(raw)
            if not line:
                continue
            self._tally(line)
            counted += 1
        return counted

    def load(self, source: PathLike) -> None:
        """Populate the table from the file at `source`.

        Raises SourceUnavailable if the file cannot be opened; the table is
        left untouched in that case.
        """
        name = os.fspath(source)
        try:
            handle = open(name, "r", encoding=self.encoding, errors="surrogateescape", newline="\n")
        except OSError as e:
            self._logger.error("tracker.load failed", extra={"source": name, "reason": str(e)})
            raise SourceUnavailable(name) from e
        with handle:
            counted = self.load_lines(handle)
        self._logger.info("tracker.load done", extra={"source": name, "lines": counted, "items": len(self._counts)})

    def lookup(self, query: str) -> int:
        return self._counts.get(normalize(query), 0)

    def entries(self) -> List[Tuple[str, int]]:
        """Table entries in ascending key order."""
        return sorted(self._counts.items())

    def list_all(self) -> str:
        return render_listing(self.entries())

    def histogram(self) -> str:
        return render_histogram(self.entries())

    def histogram_lines(self) -> List[str]:
        return histogram_lines(self.entries())

    def backup(self, sink: Optional[PathLike] = None) -> str:
        """Overwrite the backup file with the full table; returns its name.

        Raises SinkUnavailable if the destination cannot be opened.
        """
        name = os.fspath(sink) if sink is not None else self.backup_file
        document = render_backup(self.entries())
        try:
            handle = open(name, "w", encoding=self.encoding, errors="surrogateescape")
        except OSError as e:
            self._logger.error("tracker.backup failed", extra={"sink": name, "reason": str(e)})
            raise SinkUnavailable(name) from e
        with handle:
            handle.write(document)
        self._logger.info("tracker.backup written", extra={"sink": name, "items": len(self._counts)})
        return name
