"""Decoder for the cscope database header line.

The header looks like:

    cscope <version> <dir> [-c] [-T] [-q <symbols>] <trailer>
"""

from __future__ import annotations

from loguru import logger

from csgraph.core.database.cursor import RecordCursor, is_decimal
from csgraph.core.exceptions import FormatError
from csgraph.core.models import Header

HEADER_TAG = "cscope"

_FLAG_COMPRESSION = "-c"
_FLAG_PREFIX_MATCH = "-T"
_FLAG_INVERTED_INDEX = "-q"


def _parse_int(token: str, field_name: str) -> int:
    if not is_decimal(token):
        raise FormatError(f"Header {field_name} is not numeric: {token!r}")
    return int(token)


def decode_header(buffer: bytes) -> Header:
    """Decode the header at the start of buffer.

    Raises FormatError if the buffer does not start with a cscope header.
    """
    cursor = RecordCursor(buffer)
    line = cursor.read_line()
    tokens = line.split()

    if not tokens or tokens[0] != HEADER_TAG:
        raise FormatError("This does not appear to be a cscope database")
    if len(tokens) < 4:
        raise FormatError(f"Header is missing fields: {line!r}")

    version = _parse_int(tokens[1], "version")
    header = Header(
        version=version,
        directory=tokens[2],
        trailer_offset=_parse_int(tokens[-1], "trailer offset"),
        symbols_start=cursor.offset,
    )

    flags = tokens[3:-1]
    i = 0
    while i < len(flags):
        flag = flags[i]
        if flag == _FLAG_COMPRESSION:
            header.compression = True
        elif flag == _FLAG_PREFIX_MATCH:
            header.prefix_match = True
        elif flag == _FLAG_INVERTED_INDEX:
            header.inverted_index = True
            if i + 1 < len(flags) and is_decimal(flags[i + 1]):
                i += 1
                header.inverted_index_symbols = int(flags[i])
        else:
            raise FormatError(f"Unrecognized header option: {flag!r}")
        i += 1

    logger.debug(
        "Header: version={} dir={} trailer={} symbols_start={}",
        header.version,
        header.directory,
        header.trailer_offset,
        header.symbols_start,
    )
    return header
