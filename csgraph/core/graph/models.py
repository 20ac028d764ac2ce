"""Data models for graph queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallEdge:
    """One caller -> callee edge in a query result."""

    caller: str
    callee: str

    def render(self) -> str:
        return f"    {self.caller} -> {self.callee}\n"

    def __repr__(self) -> str:
        return f"CallEdge({self.caller} -> {self.callee})"
