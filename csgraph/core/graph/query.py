"""Depth-bounded caller/callee queries rendered as Graphviz digraphs.

Traversals keep no visited set: a cycle is walked again on every level
until depth runs out, so the number of edges can grow quickly on dense or
cyclic graphs. Depth is the only bound. Pass prune_cycles=True to stop
expanding a function that is already on the current path; the edge into
it is still reported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from csgraph.core.graph.models import CallEdge

if TYPE_CHECKING:
    from csgraph.core.graph.base import CallGraph

DEFAULT_DEPTH = 2

_Neighbors = Callable[[str], Iterator[CallEdge]]


def _walk(
    start: str,
    depth: int,
    neighbors: _Neighbors,
    prune_cycles: bool,
    upstream: bool,
) -> Iterator[CallEdge]:
    on_path: set[str] = set()

    def dfs(name: str, remaining: int) -> Iterator[CallEdge]:
        if remaining <= 0:
            return
        if prune_cycles:
            on_path.add(name)
        for edge in neighbors(name):
            yield edge
            following = edge.caller if upstream else edge.callee
            if prune_cycles and following in on_path:
                continue
            yield from dfs(following, remaining - 1)
        if prune_cycles:
            on_path.discard(name)

    return dfs(start, depth)


def iter_callees(
    graph: CallGraph, name: str, depth: int, prune_cycles: bool = False
) -> Iterator[CallEdge]:
    """Yield name -> callee edges, then each callee's own, depth levels deep."""

    def neighbors(fn: str) -> Iterator[CallEdge]:
        for callee in graph.get_callees(fn):
            yield CallEdge(fn, callee)

    return _walk(name, depth, neighbors, prune_cycles, upstream=False)


def iter_callers(
    graph: CallGraph, name: str, depth: int, prune_cycles: bool = False
) -> Iterator[CallEdge]:
    """Yield caller -> name edges, then each caller's own callers, depth levels deep.

    Every level scans the whole graph; there is no reverse index. O(V) per level.
    """

    def neighbors(fn: str) -> Iterator[CallEdge]:
        for caller in graph:
            if graph.is_caller_of(caller, fn):
                yield CallEdge(caller, fn)

    return _walk(name, depth, neighbors, prune_cycles, upstream=True)


def compute_callees(
    graph: CallGraph, name: str, depth: int, prune_cycles: bool = False
) -> list[CallEdge]:
    return list(iter_callees(graph, name, depth, prune_cycles))


def compute_callers(
    graph: CallGraph, name: str, depth: int, prune_cycles: bool = False
) -> list[CallEdge]:
    return list(iter_callers(graph, name, depth, prune_cycles))


def render_digraph(title: str, edges: list[CallEdge]) -> str:
    """Render edges as a digraph block, or "" when there are none."""
    if not edges:
        return ""
    body = "".join(edge.render() for edge in edges)
    return f'digraph "{title}" {{\n{body}}}\n'


def format_callers(graph: CallGraph, name: str, depth: int, prune_cycles: bool = False) -> str:
    return render_digraph(f"Callers to {name}", compute_callers(graph, name, depth, prune_cycles))


def format_callees(graph: CallGraph, name: str, depth: int, prune_cycles: bool = False) -> str:
    return render_digraph(f"Callees of {name}", compute_callees(graph, name, depth, prune_cycles))


def render_query(
    graph: CallGraph,
    name: str,
    depth: int = DEFAULT_DEPTH,
    callers: bool = True,
    callees: bool = True,
    prune_cycles: bool = False,
) -> str:
    """Render the callers block then the callees block."""
    blocks = []
    if callers:
        blocks.append(format_callers(graph, name, depth, prune_cycles))
    if callees:
        blocks.append(format_callees(graph, name, depth, prune_cycles))
    return "".join(blocks)
