"""Load a cscope database from a buffer or from disk."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from csgraph.core.database.header import decode_header
from csgraph.core.database.symbols import decode_symbols
from csgraph.core.database.trailer import decode_trailer
from csgraph.core.models import CscopeDatabase, DecodeStats

DEFAULT_DB_NAME = "cscope.out"


def get_default_db_path(directory: Path) -> Path:
    """Get the default database path for a directory."""
    return directory / DEFAULT_DB_NAME


def read_database(path: Path) -> bytes:
    """Read a whole database file into memory."""
    if not path.is_file():
        raise FileNotFoundError(f"No cscope database found at {path}")
    return path.read_bytes()


def load_database(buffer: bytes) -> CscopeDatabase:
    """Decode header, trailer and symbols from buffer.

    Raises FormatError if the header is invalid; nothing is returned in that case.
    """
    header = decode_header(buffer)
    trailer = decode_trailer(buffer, header.trailer_offset)

    stats = DecodeStats()
    end = min(header.trailer_offset, len(buffer))
    files = decode_symbols(buffer, header.symbols_start, end, stats)

    logger.info(
        "Loaded {} files, {} functions, {} call sites",
        stats.files,
        stats.functions,
        stats.call_sites,
    )
    return CscopeDatabase(header=header, trailer=trailer, files=files, stats=stats)
