"""
Decoding of cscope cross-reference databases (cscope.out).

Layout of a database:
    - Header: "cscope <version> <dir> [flags] <trailer offset>"
    - Symbol region: per-file, per-line symbol records
    - Trailer: viewpath, source and include file lists

Modules:
    - cursor: line reader with one-line rewind
    - header / trailer / symbols: decoders for each region
    - loader: load_database() runs all three over one buffer
"""

from csgraph.core.database.cursor import MAX_RECORD_LENGTH, RecordCursor, read_line
from csgraph.core.database.header import decode_header
from csgraph.core.database.loader import get_default_db_path, load_database, read_database
from csgraph.core.database.symbols import decode_symbols
from csgraph.core.database.trailer import decode_trailer

__all__ = [
    "MAX_RECORD_LENGTH",
    "RecordCursor",
    "read_line",
    "decode_header",
    "decode_trailer",
    "decode_symbols",
    "get_default_db_path",
    "load_database",
    "read_database",
]
