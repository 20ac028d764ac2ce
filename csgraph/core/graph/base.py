"""Immutable CallGraph keyed by function name."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class CallGraph:
    """Directed graph from function name to the distinct names it calls.

    Callee names need not be nodes themselves; undefined functions are leaves.
    Node order is the order the graph was built in.
    """

    __slots__ = ("_callees", "_num_edges")

    def __init__(self, callees: Mapping[str, tuple[str, ...]] | None = None) -> None:
        table = {name: tuple(names) for name, names in (callees or {}).items()}
        self._callees: Mapping[str, tuple[str, ...]] = MappingProxyType(table)
        self._num_edges = sum(len(names) for names in table.values())

    def get_callees(self, name: str) -> tuple[str, ...]:
        """Get direct callees. Unknown names have none. O(1)."""
        return self._callees.get(name, ())

    def is_caller_of(self, caller: str, callee: str) -> bool:
        """Does caller call callee? O(out-degree)."""
        return callee in self._callees.get(caller, ())

    def __contains__(self, name: object) -> bool:
        return name in self._callees

    def __iter__(self) -> Iterator[str]:
        return iter(self._callees)

    def __len__(self) -> int:
        return len(self._callees)

    @property
    def num_nodes(self) -> int:
        return len(self._callees)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def adjacency(self) -> Mapping[str, tuple[str, ...]]:
        return self._callees

    def __repr__(self) -> str:
        return f"CallGraph(nodes={self.num_nodes}, edges={self.num_edges})"
