"""Base emitter protocol and shared escaping."""

from __future__ import annotations

from typing import Protocol

from flowdiag.ir.graph import DiagramGraph
from flowdiag.types import NodeStyle

# fill, stroke
STYLE_COLORS: dict[NodeStyle, tuple[str, str]] = {
    NodeStyle.Step: ("#E8F5E9", "#2E7D32"),
    NodeStyle.Dir: ("#E3F2FD", "#1976D2"),
    NodeStyle.File: ("#FFF3E0", "#F57C00"),
}


def escape_label(text: str) -> str:
    """Escape text for a quoted Mermaid or DOT string.

    Backslashes go first so the ones added for quotes are not doubled.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", " ")


class Emitter(Protocol):
    """Protocol that all emitters must implement."""

    def emit(self, graph: DiagramGraph, title: str | None = None) -> str:
        """Serialize a graph with assigned internal ids to diagram text."""
        ...
