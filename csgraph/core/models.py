"""Data models for csgraph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

_V = TypeVar("_V")


class Mark(Enum):
    """One-character marks that tag the symbol following them."""

    FILE = "@"
    FUNCTION_DEFINITION = "$"
    FUNCTION_CALL = "`"
    FUNCTION_END = "}"
    DEFINE = "#"
    DEFINE_END = ")"
    INCLUDE = "~"
    DIRECT_ASSIGNMENT = "="
    ENUM_STRUCT_UNION_END = ";"
    CLASS_DEFINITION = "c"
    ENUM_DEFINITION = "e"
    GLOBAL_DEFINITION = "g"
    LOCAL_DEFINITION = "l"
    MEMBER_DEFINITION = "m"
    PARAMETER_DEFINITION = "p"
    STRUCT_DEFINITION = "s"
    TYPEDEF_DEFINITION = "t"
    UNION_DEFINITION = "u"

    @classmethod
    def from_char(cls, char: str) -> Mark | None:
        """Return the mark for a character, or None if it is not reserved."""
        return _MARKS_BY_CHAR.get(char)


_MARKS_BY_CHAR = {mark.value: mark for mark in Mark}


def insert_if_absent(table: dict[str, _V], key: str, value: _V) -> bool:
    """Store value under key only if the key is missing.

    Returns True if the value was stored. An existing entry is never replaced.
    """
    if key in table:
        return False
    table[key] = value
    return True


@dataclass
class Symbol:
    """A symbol occurrence in the database."""

    name: str
    mark: Mark
    line: int
    file: SourceFile | None = field(default=None, repr=False, compare=False)


@dataclass
class CallSite(Symbol):
    """A function call made from inside a function definition."""


@dataclass
class FunctionDefinition(Symbol):
    """A function definition and the distinct functions it calls."""

    callees: dict[str, CallSite] = field(default_factory=dict)

    def add_callee(self, call: CallSite) -> bool:
        """Add a call site; only the first call to each name is kept."""
        return insert_if_absent(self.callees, call.name, call)

    @property
    def callee_names(self) -> list[str]:
        return list(self.callees)


@dataclass
class SourceFile:
    """A source file record and the functions defined in it."""

    name: str
    mark: Mark | None = None
    functions: dict[str, FunctionDefinition] = field(default_factory=dict)

    def add_function(self, definition: FunctionDefinition) -> bool:
        """Register a definition; the first definition of each name wins."""
        return insert_if_absent(self.functions, definition.name, definition)

    @property
    def function_count(self) -> int:
        return len(self.functions)


@dataclass
class Header:
    """The cscope database header line."""

    version: int
    directory: str
    trailer_offset: int
    symbols_start: int
    compression: bool = False
    inverted_index: bool = False
    prefix_match: bool = False
    inverted_index_symbols: int | None = None


@dataclass
class Trailer:
    """File lists stored after the symbol region."""

    viewpaths: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)
    include_placeholder: str = ""

    @property
    def n_viewpaths(self) -> int:
        return len(self.viewpaths)

    @property
    def n_sources(self) -> int:
        return len(self.sources)

    @property
    def n_includes(self) -> int:
        return len(self.includes)


class DecodeStats:
    """Statistics from decoding the symbol region."""

    def __init__(self) -> None:
        self.files: int = 0
        self.discarded_files: int = 0
        self.functions: int = 0
        self.call_sites: int = 0
        self.duplicate_functions: int = 0
        self.orphan_calls: int = 0
        self.truncated_records: int = 0

    def as_dict(self) -> dict[str, int]:
        return dict(vars(self))

    def __repr__(self) -> str:
        return (
            f"DecodeStats(files={self.files}, functions={self.functions}, "
            f"call_sites={self.call_sites}, discarded_files={self.discarded_files}, "
            f"duplicate_functions={self.duplicate_functions}, "
            f"orphan_calls={self.orphan_calls}, truncated_records={self.truncated_records})"
        )


@dataclass
class CscopeDatabase:
    """A fully decoded cscope database."""

    header: Header
    trailer: Trailer
    files: list[SourceFile]
    stats: DecodeStats = field(default_factory=DecodeStats)
