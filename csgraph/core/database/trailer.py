"""Decoder for the viewpath/source/include lists after the symbol region."""

from __future__ import annotations

from loguru import logger

from csgraph.core.database.cursor import RecordCursor, is_decimal
from csgraph.core.models import Trailer


def _read_count(cursor: RecordCursor) -> int:
    text = cursor.read_line().strip()
    return int(text) if is_decimal(text) else 0


def _read_entries(cursor: RecordCursor, count: int, kind: str) -> list[str]:
    entries = []
    for i in range(count):
        if cursor.at_end:
            logger.debug("Trailer ends after {} of {} {} entries", i, count, kind)
            break
        entry = cursor.read_line()
        logger.debug("[{} of {}] {}: {}", i + 1, count, kind, entry)
        entries.append(entry)
    return entries


def decode_trailer(buffer: bytes, offset: int) -> Trailer:
    """Decode the trailer at offset.

    An offset outside the buffer gives an empty Trailer. The trailer is
    informational only; nothing in the call graph depends on it.
    """
    if offset >= len(buffer):
        logger.debug("Trailer offset {} is past the end of the database", offset)
        return Trailer()

    cursor = RecordCursor(buffer, offset)
    trailer = Trailer()
    trailer.viewpaths = _read_entries(cursor, _read_count(cursor), "Viewpath")
    trailer.sources = _read_entries(cursor, _read_count(cursor), "Source")

    n_includes = _read_count(cursor)
    trailer.include_placeholder = cursor.read_line()
    trailer.includes = _read_entries(cursor, n_includes, "Include")
    return trailer
