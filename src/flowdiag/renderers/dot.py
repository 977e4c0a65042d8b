"""Graphviz DOT emitter — `digraph G { ... }` text."""

from __future__ import annotations

from flowdiag.ir.graph import DiagramGraph, NodeData
from flowdiag.renderers.base import STYLE_COLORS, escape_label
from flowdiag.types import GraphKind, NodeShape

# shape, style; stadium is drawn as a rounded box
_DOT_SHAPES: dict[NodeShape, tuple[str, str]] = {
    NodeShape.Box: ("box", "filled"),
    NodeShape.Diamond: ("diamond", "filled"),
    NodeShape.Circle: ("circle", "filled"),
    NodeShape.Stadium: ("box", "rounded,filled"),
}


def node_statement(node: NodeData, kind: GraphKind) -> str:
    label = escape_label(node.label)
    fill, _ = STYLE_COLORS[node.style]
    if kind is GraphKind.Tree:
        return f'{node.internal_id} [label="{label}", style=filled, fillcolor="{fill}"];'
    shape, style = _DOT_SHAPES[node.shape]
    return f'{node.internal_id} [label="{label}", shape={shape}, style="{style}", fillcolor="{fill}"];'


class DotEmitter:
    def emit(self, graph: DiagramGraph, title: str | None = None) -> str:
        lines = [
            "digraph G {",
            "  graph [rankdir=TB];",
            "  node [shape=box];",
        ]
        if title:
            lines.append(f'  label="{escape_label(title)}";')
            lines.append("  labelloc=top;")

        for node in graph.nodes():
            lines.append(f"  {node_statement(node, graph.kind)}")

        for edge in graph.edges():
            src = graph.internal_id(edge.from_id)
            dst = graph.internal_id(edge.to_id)
            if edge.label:
                lines.append(f'  {src} -> {dst} [label="{escape_label(edge.label)}"];')
            else:
                lines.append(f"  {src} -> {dst};")

        lines.append("}")
        return "\n".join(lines) + "\n"
