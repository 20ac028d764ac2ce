"""
Core module: data models, exceptions, decoding and the call graph.

Models (models.py):
    - SourceFile: A file record and the functions defined in it
    - FunctionDefinition / CallSite: Symbols collected from the database
    - Header / Trailer: The regions around the symbol data
    - Mark: The one-character symbol marks

Exceptions (exceptions.py):
    - CsgraphError: Base exception for all csgraph errors
    - FormatError: The database header is not understood
    - TruncatedRecordError: A record is overlong or cut off

Database (database/):
    - load_database(): Decode a cscope.out buffer

Graph (graph/):
    - build_call_graph(): Flatten decoded files into a CallGraph
"""

from csgraph.core.database import get_default_db_path, load_database, read_database
from csgraph.core.exceptions import CsgraphError, FormatError, TruncatedRecordError
from csgraph.core.graph import CallGraph, build_call_graph
from csgraph.core.models import (
    CallSite,
    CscopeDatabase,
    DecodeStats,
    FunctionDefinition,
    Header,
    Mark,
    SourceFile,
    Trailer,
)

__all__ = [
    # Models
    "SourceFile",
    "FunctionDefinition",
    "CallSite",
    "Header",
    "Trailer",
    "DecodeStats",
    "CscopeDatabase",
    "Mark",
    # Exceptions
    "CsgraphError",
    "FormatError",
    "TruncatedRecordError",
    # Database
    "load_database",
    "read_database",
    "get_default_db_path",
    # Graph
    "CallGraph",
    "build_call_graph",
]
