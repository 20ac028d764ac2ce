"""csgraph custom exceptions."""


class CsgraphError(Exception):
    """Base exception for csgraph errors."""


class FormatError(CsgraphError):
    """The database is not a cscope database this decoder understands."""


class TruncatedRecordError(CsgraphError):
    """A record is longer than the maximum length or the buffer ends mid-record."""

    def __init__(self, message: str, offset: int, next_offset: int) -> None:
        super().__init__(message)
        self.offset = offset
        self.next_offset = next_offset
