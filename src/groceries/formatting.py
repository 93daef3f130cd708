"""Text renderers for the frequency table and the backup document."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from src.core.constants import BACKUP_HEADER, BACKUP_SEPARATOR, FIELD_SEPARATOR, NAME_WIDTH
from src.core.schemas import BackupDocument, ItemFrequency, try_validate_item

Entry = Tuple[str, int]

LISTING_TITLE = "Item Frequencies:"
HISTOGRAM_TITLE = "Frequency Histogram:"


def format_entry(name: str, count: int) -> str:
    return f"{name:<{NAME_WIDTH}}{FIELD_SEPARATOR}{count}"


def format_histogram_bar(name: str, count: int) -> str:
    return f"{name:<{NAME_WIDTH}} {'*' * count} ({count})"


def listing_lines(entries: Iterable[Entry]) -> List[str]:
    return [format_entry(name, count) for name, count in entries]


def histogram_lines(entries: Iterable[Entry]) -> List[str]:
    return [format_histogram_bar(name, count) for name, count in entries]


def _section(title: str, lines: List[str]) -> str:
    # Title is preceded by a blank line and underlined to its own width
    formatted = f"\n{title}\n{'-' * len(title)}\n"
    for line in lines:
        formatted += f"{line}\n"
    return formatted


def render_listing(entries: Iterable[Entry]) -> str:
    return _section(LISTING_TITLE, listing_lines(entries))


def render_histogram(entries: Iterable[Entry]) -> str:
    return _section(HISTOGRAM_TITLE, histogram_lines(entries))


def render_backup(entries: Iterable[Entry]) -> str:
    formatted = f"{BACKUP_HEADER}\n{BACKUP_SEPARATOR}\n"
    for line in listing_lines(entries):
        formatted += f"{line}\n"
    return formatted


def parse_entry(line: str) -> ItemFrequency:
    """Parse one `name : count` line back into an ItemFrequency.

    The count never contains the separator, so the split is taken from the
    right and names that themselves contain " : " survive. Padding is only
    stripped when the name field is exactly the padded width.
    """
    name_field, sep, count_field = line.rpartition(FIELD_SEPARATOR)
    if not sep:
        raise ValueError(f"Malformed backup line (missing '{FIELD_SEPARATOR.strip()}'): {line!r}")
    name = name_field.rstrip(" ") if len(name_field) == NAME_WIDTH else name_field
    item = try_validate_item(name, count_field.strip())
    if item is None:
        raise ValueError(f"Malformed backup line (bad count): {line!r}")
    return item


def parse_backup(text: str) -> BackupDocument:
    lines = text.splitlines()
    if len(lines) < 2 or lines[0] != BACKUP_HEADER or lines[1] != BACKUP_SEPARATOR:
        raise ValueError("Not a grocery tracker backup: missing header lines")
    items = [parse_entry(line) for line in lines[2:] if line]
    return BackupDocument(header=lines[0], separator=lines[1], items=items)
