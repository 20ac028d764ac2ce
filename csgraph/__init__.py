"""
csgraph: Call graphs from cscope cross-reference databases.

csgraph decodes a pre-built cscope.out database to build a call graph, enabling you to:
- Find who calls a function, up to a given depth
- Find what a function calls, up to a given depth
- Emit the result as Graphviz digraph text

Usage:
    from csgraph.core import build_call_graph, load_database, read_database
    from csgraph.core.graph.query import render_query

    database = load_database(read_database(Path("cscope.out")))
    graph = build_call_graph(database.files)
    print(render_query(graph, "main", depth=2))
"""

from loguru import logger

__version__ = "0.1.0"

# Silent as a library; configure_logging() turns it back on.
logger.disable("csgraph")
