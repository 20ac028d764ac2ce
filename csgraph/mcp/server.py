"""MCP server implementation for csgraph."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from csgraph.core.database import get_default_db_path, load_database, read_database
from csgraph.core.exceptions import CsgraphError
from csgraph.core.graph import CallGraph, build_call_graph
from csgraph.core.graph.models import CallEdge
from csgraph.core.graph.query import (
    DEFAULT_DEPTH,
    compute_callees,
    compute_callers,
    render_digraph,
)
from csgraph.core.models import CscopeDatabase

server = Server("csgraph")

_NAME_PROPERTY = {
    "type": "string",
    "description": "Name of the function",
}
_DEPTH_PROPERTY = {
    "type": "integer",
    "description": f"Depth of traversal (default: {DEFAULT_DEPTH})",
    "default": DEFAULT_DEPTH,
    "minimum": 0,
}
_DATABASE_PROPERTY = {
    "type": "string",
    "description": "Path to the cscope.out database (default: ./cscope.out)",
}


def _get_database(database: str | None) -> CscopeDatabase:
    """Load the database at the given path, or cscope.out in the current directory."""
    path = Path(database) if database else get_default_db_path(Path.cwd())
    if not path.exists():
        raise FileNotFoundError(
            f"No cscope database found. Run 'cscope -b' first.\nExpected: {path}"
        )
    return load_database(read_database(path))


def _get_graph(database: str | None) -> CallGraph:
    return build_call_graph(_get_database(database).files)


def _parse_depth(value: Any) -> int:
    """Accept a non-negative whole number, as the CLI does."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"depth must be a non-negative integer, got {value!r}")
    try:
        depth = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"depth must be a non-negative integer, got {value!r}") from e
    if depth < 0:
        raise ValueError(f"depth must be a non-negative integer, got {value!r}")
    return depth


def _edges_to_list(edges: list[CallEdge]) -> list[dict[str, str]]:
    return [{"caller": edge.caller, "callee": edge.callee} for edge in edges]


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="csgraph_callers",
            description=(
                "Find the functions that call a given function, recursively up to a depth. "
                "Returns caller -> callee edges and a Graphviz digraph."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": _NAME_PROPERTY,
                    "depth": _DEPTH_PROPERTY,
                    "database": _DATABASE_PROPERTY,
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="csgraph_callees",
            description=(
                "Find the functions a given function calls, recursively up to a depth. "
                "Returns caller -> callee edges and a Graphviz digraph."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": _NAME_PROPERTY,
                    "depth": _DEPTH_PROPERTY,
                    "database": _DATABASE_PROPERTY,
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="csgraph_info",
            description="Get header, trailer and decode statistics of a cscope database.",
            inputSchema={
                "type": "object",
                "properties": {
                    "database": _DATABASE_PROPERTY,
                },
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "csgraph_callers":
            result = _handle_callers(
                arguments["name"],
                _parse_depth(arguments.get("depth", DEFAULT_DEPTH)),
                arguments.get("database"),
            )
        elif name == "csgraph_callees":
            result = _handle_callees(
                arguments["name"],
                _parse_depth(arguments.get("depth", DEFAULT_DEPTH)),
                arguments.get("database"),
            )
        elif name == "csgraph_info":
            result = _handle_info(arguments.get("database"))
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except FileNotFoundError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except CsgraphError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Invalid database: {e}"}))]
    except ValueError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except RecursionError:
        error = {"error": "depth is too large for this graph, try a smaller depth"}
        return [TextContent(type="text", text=json.dumps(error))]


def _handle_callers(name: str, depth: int, database: str | None) -> dict[str, Any]:
    """Handle csgraph_callers tool."""
    edges = compute_callers(_get_graph(database), name, depth)
    return {
        "name": name,
        "depth": depth,
        "edges": _edges_to_list(edges),
        "digraph": render_digraph(f"Callers to {name}", edges),
    }


def _handle_callees(name: str, depth: int, database: str | None) -> dict[str, Any]:
    """Handle csgraph_callees tool."""
    edges = compute_callees(_get_graph(database), name, depth)
    return {
        "name": name,
        "depth": depth,
        "edges": _edges_to_list(edges),
        "digraph": render_digraph(f"Callees of {name}", edges),
    }


def _handle_info(database: str | None) -> dict[str, Any]:
    """Handle csgraph_info tool."""
    db = _get_database(database)
    return {
        "version": db.header.version,
        "directory": db.header.directory,
        "compression": db.header.compression,
        "inverted_index": db.header.inverted_index,
        "prefix_match": db.header.prefix_match,
        "viewpaths": db.trailer.n_viewpaths,
        "sources": db.trailer.n_sources,
        "includes": db.trailer.n_includes,
        "stats": db.stats.as_dict(),
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
