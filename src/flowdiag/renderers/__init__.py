"""Emitter registry — pick the serializer for an output format."""

from __future__ import annotations

from flowdiag.ir.graph import DiagramGraph
from flowdiag.renderers.base import Emitter, escape_label
from flowdiag.renderers.dot import DotEmitter
from flowdiag.renderers.mermaid import MermaidEmitter
from flowdiag.types import OutputFormat

_EMITTERS: dict[OutputFormat, type] = {
    OutputFormat.Mermaid: MermaidEmitter,
    OutputFormat.Dot: DotEmitter,
}


def get_emitter(fmt: OutputFormat) -> Emitter:
    return _EMITTERS[fmt]()


def emit(graph: DiagramGraph, fmt: OutputFormat, title: str | None = None) -> str:
    """Serialize a graph in the requested format."""
    return get_emitter(fmt).emit(graph, title)


__all__ = [
    "DotEmitter",
    "Emitter",
    "MermaidEmitter",
    "emit",
    "escape_label",
    "get_emitter",
]
