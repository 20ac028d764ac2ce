"""Flatten decoded source files into a CallGraph."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from csgraph.core.graph.base import CallGraph
from csgraph.core.models import SourceFile, insert_if_absent

ProgressCallback = Callable[[int], None]

PROGRESS_INTERVAL = 1000


def build_call_graph(
    files: Iterable[SourceFile],
    on_progress: ProgressCallback | None = None,
) -> CallGraph:
    """Build the graph from every function defined in files. O(definitions + calls).

    When two files define the same name, the file decoded first wins and the
    later definition's calls are not merged in.

    Args:
        files: Decoded files, in decode order
        on_progress: Optional callback receiving the number of definitions seen

    Returns:
        An immutable CallGraph
    """
    table: dict[str, tuple[str, ...]] = {}
    count = 0

    for source in files:
        for name, definition in source.functions.items():
            insert_if_absent(table, name, tuple(definition.callees))
            count += 1
            if on_progress and count % PROGRESS_INTERVAL == 0:
                on_progress(count)

    if on_progress:
        on_progress(count)
    return CallGraph(table)
