"""
MCP server for csgraph.

Exposes cscope call graph queries to LLMs via the Model Context Protocol.

Tools:
    - csgraph_callers: Find what calls a function, up to a depth
    - csgraph_callees: Find what a function calls, up to a depth
    - csgraph_info: Get header, trailer and decode statistics

Usage:
    Install: pip install csgraph
    Run: csgraph-mcp
"""

import asyncio

from csgraph.logging import configure_logging
from csgraph.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    configure_logging()
    asyncio.run(_serve())


__all__ = ["serve"]
