"""Mermaid emitter — `graph TD` flowchart text."""

from __future__ import annotations

from flowdiag.ir.graph import DiagramGraph, NodeData
from flowdiag.renderers.base import STYLE_COLORS, escape_label
from flowdiag.types import GraphKind, NodeShape, NodeStyle

_CLASSES: dict[GraphKind, list[NodeStyle]] = {
    GraphKind.Flow: [NodeStyle.Step],
    GraphKind.Tree: [NodeStyle.Dir, NodeStyle.File],
}


def class_def(style: NodeStyle) -> str:
    fill, stroke = STYLE_COLORS[style]
    return f"classDef {style.value} fill:{fill},stroke:{stroke},stroke-width:1px;"


def node_syntax(node: NodeData) -> str:
    label = escape_label(node.label)
    if node.shape is NodeShape.Diamond:
        return f"{node.internal_id}{{{label}}}"
    if node.shape is NodeShape.Circle:
        return f"{node.internal_id}(({label}))"
    if node.shape is NodeShape.Stadium:
        return f"{node.internal_id}([{label}])"
    return f'{node.internal_id}["{label}"]'


class MermaidEmitter:
    def emit(self, graph: DiagramGraph, title: str | None = None) -> str:
        lines = ["graph TD"]
        if title:
            lines.append(f"%% {escape_label(title)}")
        lines.extend(class_def(style) for style in _CLASSES[graph.kind])

        for node in graph.nodes():
            lines.append(f"  {node_syntax(node)}:::{node.style.value}")

        for edge in graph.edges():
            src = graph.internal_id(edge.from_id)
            dst = graph.internal_id(edge.to_id)
            if edge.label:
                lines.append(f"  {src} -->|{escape_label(edge.label)}| {dst}")
            else:
                lines.append(f"  {src} --> {dst}")

        return "\n".join(lines) + "\n"
