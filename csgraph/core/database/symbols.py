"""Decoder for the per-file symbol records between the header and the trailer.

Each file in the symbol region looks like:

    <mark><file path>
    <empty line>

and for each source line containing a symbol:

    <line number><blank><non-symbol text>
    <optional mark><symbol>
    <non-symbol text>
    repeat above 2 lines as necessary
    <empty line>

Only function definitions and function calls are collected. Calls are
attached to the most recent definition in the same file.
"""

from __future__ import annotations

import re

from loguru import logger

from csgraph.core.database.cursor import RecordCursor
from csgraph.core.models import CallSite, DecodeStats, FunctionDefinition, Mark, SourceFile

_LINE_NUMBER = re.compile(r"\d+")

_COLLECTED_MARKS = (Mark.FUNCTION_DEFINITION, Mark.FUNCTION_CALL)


def _is_file_record(text: str) -> bool:
    return text.lstrip().startswith(Mark.FILE.value)


def _is_file_record_line(text: str) -> bool:
    """A file record where a symbol line is expected: "<tab>@<path>"."""
    return text.lstrip(" ").startswith("\t" + Mark.FILE.value)


def _parse_line_number(text: str) -> int:
    match = _LINE_NUMBER.match(text.lstrip())
    return int(match.group()) if match else 0


def _parse_symbol(text: str) -> tuple[Mark, str] | None:
    """Split a "<tab><mark><symbol>" line; None for non-symbol text."""
    text = text.lstrip(" ")
    if len(text) < 2 or text[0] != "\t":
        return None
    mark = Mark.from_char(text[1])
    if mark is None:
        return None
    return mark, text[2:]


def _read_file_record(cursor: RecordCursor) -> SourceFile:
    text = cursor.read_line().lstrip()
    source = SourceFile(name=text[1:], mark=Mark.from_char(text[:1]) if text else None)

    # <empty line>
    if cursor.read_line():
        cursor.rewind_last_line()
    return source


def _decode_line_block(
    cursor: RecordCursor,
    source: SourceFile,
    line: int,
    current: FunctionDefinition | None,
    stats: DecodeStats,
) -> FunctionDefinition | None:
    """Collect the definitions and calls recorded for one source line.

    Returns the definition that later calls in this file belong to.
    """
    while not cursor.at_end:
        text = cursor.read_line()
        if not text:
            break
        if _is_file_record_line(text):
            cursor.rewind_last_line()
            break

        symbol = _parse_symbol(text)
        if symbol is None:
            continue
        mark, name = symbol
        if mark not in _COLLECTED_MARKS or not name:
            continue

        if mark is Mark.FUNCTION_CALL:
            if current is None:
                # A call outside any function, probably inside a macro
                stats.orphan_calls += 1
                logger.debug("Dropping call to {} at {}:{}", name, source.name, line)
                continue
            if current.add_callee(CallSite(name, mark, line, source)):
                stats.call_sites += 1
        else:
            current = FunctionDefinition(name, mark, line, source)
            if source.add_function(current):
                stats.functions += 1
            else:
                stats.duplicate_functions += 1
                logger.debug("Ignoring redefinition of {} at {}:{}", name, source.name, line)

        # <non-symbol text>
        cursor.read_line()

    return current


def _decode_file_symbols(cursor: RecordCursor, source: SourceFile, stats: DecodeStats) -> None:
    current: FunctionDefinition | None = None

    while not cursor.at_end:
        text = cursor.read_line()
        if _is_file_record(text):
            cursor.rewind_last_line()
            return

        current = _decode_line_block(cursor, source, _parse_line_number(text), current, stats)


def decode_symbols(
    buffer: bytes,
    start: int,
    end: int,
    stats: DecodeStats | None = None,
) -> list[SourceFile]:
    """Decode every file record from start up to end (the trailer offset).

    Files with an empty path are consumed but not returned.
    """
    if stats is None:
        stats = DecodeStats()

    cursor = RecordCursor(buffer, start, end)
    files: list[SourceFile] = []

    while not cursor.at_end:
        source = _read_file_record(cursor)
        _decode_file_symbols(cursor, source, stats)

        if not source.name:
            stats.discarded_files += 1
            continue

        logger.debug("Loaded {} ({} functions)", source.name, source.function_count)
        files.append(source)
        stats.files += 1

    stats.truncated_records += cursor.truncated
    return files
