"""
Call graph data structures and queries.

Data Structures:
    - CallGraph: Immutable name -> callee names mapping with O(1) lookups
    - CallEdge: A caller -> callee pair in a query result

Building:
    - build_call_graph(): Flatten decoded files, first definition of a name wins

Queries:
    - compute_callees / compute_callers: depth-bounded recursive traversal
    - render_query(): Graphviz digraph text for callers and callees
"""

from csgraph.core.graph.base import CallGraph
from csgraph.core.graph.builder import build_call_graph
from csgraph.core.graph.models import CallEdge
from csgraph.core.graph.query import compute_callees, compute_callers, render_query

__all__ = [
    "CallGraph",
    "CallEdge",
    "build_call_graph",
    "compute_callees",
    "compute_callers",
    "render_query",
]
