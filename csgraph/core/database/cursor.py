"""Line-oriented reading over a cscope database buffer."""

from __future__ import annotations

from loguru import logger

from csgraph.core.exceptions import TruncatedRecordError

MAX_RECORD_LENGTH = 1024

_NEWLINE = 0x0A


def decode_record(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def is_decimal(text: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return text.isascii() and text.isdigit()


def read_line(buffer: bytes, offset: int, limit: int | None = None) -> tuple[str, int]:
    """Read the record starting at offset.

    Returns the record text without its newline and the offset of the next
    record. Raises TruncatedRecordError if the record is longer than
    MAX_RECORD_LENGTH or has no newline before limit.
    """
    end = len(buffer) if limit is None else min(limit, len(buffer))
    newline = buffer.find(b"\n", offset, end)
    if newline == -1:
        raise TruncatedRecordError(
            f"Record at offset {offset} has no terminating newline", offset, end
        )

    next_offset = newline + 1
    if newline - offset > MAX_RECORD_LENGTH:
        raise TruncatedRecordError(
            f"Record at offset {offset} exceeds {MAX_RECORD_LENGTH} bytes",
            offset,
            next_offset,
        )
    return decode_record(buffer[offset:newline]), next_offset


class RecordCursor:
    """Sequential reader that can un-read the line it just read."""

    __slots__ = ("_buffer", "_limit", "_offset", "_last_offset", "truncated")

    def __init__(self, buffer: bytes, offset: int = 0, limit: int | None = None) -> None:
        self._buffer = buffer
        self._limit = len(buffer) if limit is None else min(limit, len(buffer))
        self._offset = offset
        self._last_offset: int | None = None
        self.truncated: int = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def at_end(self) -> bool:
        return self._offset >= self._limit

    def read_line(self) -> str:
        """Read the next record, or "" if it is truncated or past the limit."""
        if self.at_end:
            self._last_offset = None
            return ""

        self._last_offset = self._offset
        try:
            text, self._offset = read_line(self._buffer, self._offset, self._limit)
        except TruncatedRecordError as e:
            logger.debug("Skipping record: {}", e)
            self.truncated += 1
            self._offset = e.next_offset
            return ""
        return text

    def rewind_last_line(self) -> None:
        """Un-read the most recently read line."""
        if self._last_offset is not None:
            self._offset = self._last_offset
            self._last_offset = None

    def __repr__(self) -> str:
        return f"RecordCursor(offset={self._offset}, limit={self._limit})"
