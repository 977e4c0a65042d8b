"""Flow spec parser — line-oriented node and edge declarations.

Grammar (one statement per line):

    a -> b                  edge
    a[Start] -> b{Ok?}      edge with shaped, labelled nodes
    b -> c, d | yes         fan-out, both edges labelled "yes"
    c: Some label           node declaration (box)
    d((Done))               node declaration

Nodes may be mentioned many times; a later non-empty label or shape replaces
the stored one, a bare mention never erases it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from flowdiag.errors import InvalidNodeId, MalformedEdgeLine, NoInputProvided
from flowdiag.ir.graph import DiagramGraph, NodeData
from flowdiag.types import GraphKind, NodeShape

logger = logging.getLogger(__name__)

EDGE_ARROW = "->"
EDGE_LABEL_SEP = "|"

_NODE_ID_RE = re.compile(r"^[A-Za-z0-9_.-]+$")
_COLON_DECL_RE = re.compile(r"^([A-Za-z0-9_.-]+)\s*:\s*(.+)$")

# Longer delimiters first: "((" must win over "(" and "([" over "[".
_SHAPE_PATTERNS: list[tuple[re.Pattern[str], NodeShape]] = [
    (re.compile(r"^([A-Za-z0-9_.-]+)\(\((.*)\)\)$"), NodeShape.Circle),
    (re.compile(r"^([A-Za-z0-9_.-]+)\(\[(.*)\]\)$"), NodeShape.Stadium),
    (re.compile(r"^([A-Za-z0-9_.-]+)\{(.*)\}$"), NodeShape.Diamond),
    (re.compile(r"^([A-Za-z0-9_.-]+)\[(.*)\]$"), NodeShape.Box),
]

_OPENERS = {"[": "]", "{": "}", "(": ")"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


@dataclass
class NodeExpr:
    """A parsed node token. Empty label / None shape mean "not given"."""

    id: str
    label: str = ""
    shape: NodeShape | None = None


def parse_node_expr(expr: str) -> NodeExpr:
    """Parse `id`, `id[L]`, `id{L}`, `id((L))` or `id([L])`.

    The id is not validated here; anything unrecognised comes back whole as a
    bare id and is rejected on registration.
    """
    expr = expr.strip()
    for pattern, shape in _SHAPE_PATTERNS:
        m = pattern.match(expr)
        if m:
            return NodeExpr(id=m.group(1), label=m.group(2).strip(), shape=shape)
    return NodeExpr(id=expr)


def split_targets(text: str) -> list[str]:
    """Split an edge right-hand side on commas outside any bracket pair.

    >>> split_targets("a[x, y], b")
    ['a[x, y]', 'b']
    """
    depth = {"[": 0, "{": 0, "(": 0}
    parts: list[str] = []
    buf: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            depth[ch] += 1
        elif ch in _CLOSERS:
            depth[_CLOSERS[ch]] -= 1
        elif ch == "," and not any(depth.values()):
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return [p.strip() for p in parts if p.strip()]


def validate_node_id(node_id: str) -> None:
    if not node_id:
        raise InvalidNodeId("Invalid node id in flow spec.")
    if not _NODE_ID_RE.match(node_id):
        raise InvalidNodeId(
            f"Invalid node id '{node_id}'. Use a simple id and put the display text in brackets, e.g. id[Label]."
        )


class FlowBuilder:
    """Accumulates nodes and edges from flow spec lines.

    One builder per graph; nothing is shared between builds.
    """

    def __init__(self) -> None:
        self.graph = DiagramGraph(kind=GraphKind.Flow)

    def register(self, node_id: str, label: str = "", shape: NodeShape | None = None) -> NodeData:
        validate_node_id(node_id)
        node = self.graph.add_node(NodeData(id=node_id, label=node_id))
        if label:
            node.label = label
        if shape is not None:
            node.shape = shape
        return node

    def register_expr(self, expr: NodeExpr) -> NodeData:
        return self.register(expr.id, expr.label, expr.shape)

    def add_line(self, line: str) -> None:
        """Consume one trimmed, non-comment line."""
        if EDGE_ARROW in line:
            self._add_edge_line(line)
        else:
            self._add_node_line(line)

    def _add_edge_line(self, line: str) -> None:
        left, _, right = line.partition(EDGE_ARROW)
        left = left.strip()
        right = right.strip()

        label = ""
        if EDGE_LABEL_SEP in right:
            right, _, label = right.partition(EDGE_LABEL_SEP)
            right = right.strip()
            label = label.strip()

        if not left or not right:
            raise MalformedEdgeLine(f"Invalid edge line: {line}")

        source = self.register_expr(parse_node_expr(left))
        for token in split_targets(right):
            target = self.register_expr(parse_node_expr(token))
            self.graph.add_edge(source.id, target.id, label)

    def _add_node_line(self, line: str) -> None:
        m = _COLON_DECL_RE.match(line)
        if m:
            self.register(m.group(1), m.group(2).strip(), NodeShape.Box)
            return
        self.register_expr(parse_node_expr(line))

    def build(self) -> DiagramGraph:
        if self.graph.node_count() == 0:
            raise NoInputProvided("No nodes parsed from flow spec.")
        self.graph.assign_internal_ids()
        logger.debug(
            "flow spec parsed: %d nodes, %d edges", self.graph.node_count(), self.graph.edge_count()
        )
        return self.graph


def parse_flow_spec(lines: Iterable[str]) -> DiagramGraph:
    """Build a graph from cleaned flow spec lines."""
    builder = FlowBuilder()
    for line in lines:
        builder.add_line(line)
    return builder.build()


def build_entry_chain(entries: Iterable[str]) -> DiagramGraph:
    """Build a linear chain step0 -> step1 -> ... labelled with the entries."""
    graph = DiagramGraph(kind=GraphKind.Flow)
    prev: str | None = None
    for index, entry in enumerate(entries):
        node_id = f"step{index}"
        graph.add_node(NodeData(id=node_id, label=entry))
        if prev is not None:
            graph.add_edge(prev, node_id)
        prev = node_id
    if graph.node_count() == 0:
        raise NoInputProvided("No entries provided for flowchart.")
    graph.assign_internal_ids()
    logger.debug("entry chain built: %d steps", graph.node_count())
    return graph
