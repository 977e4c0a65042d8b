"""Tests for flowdiag.ir.graph — ordering, parallel edges, and internal ids."""

import pytest

from flowdiag.ir.graph import DiagramGraph, NodeData
from flowdiag.types import GraphKind, NodeShape, NodeStyle


def _graph(*ids: str, kind: GraphKind = GraphKind.Flow) -> DiagramGraph:
    g = DiagramGraph(kind=kind)
    for node_id in ids:
        g.add_node(NodeData(id=node_id, label=node_id))
    return g


class TestNodes:
    def test_empty_graph(self):
        g = DiagramGraph()
        assert g.node_count() == 0
        assert g.edge_count() == 0
        assert g.nodes() == []

    def test_insertion_order_kept(self):
        g = _graph("z", "a", "m")
        assert [n.id for n in g.nodes()] == ["z", "a", "m"]

    def test_add_existing_returns_stored_record(self):
        g = _graph("a")
        again = g.add_node(NodeData(id="a", label="Other", shape=NodeShape.Circle))
        assert again.label == "a"
        assert again.shape == NodeShape.Box
        assert g.node_count() == 1

    def test_defaults(self):
        g = _graph("a")
        node = g.node("a")
        assert node.shape == NodeShape.Box
        assert node.style == NodeStyle.Step
        assert node.internal_id is None


class TestEdges:
    def test_declaration_order_across_sources(self):
        g = _graph("a", "b", "c")
        g.add_edge("b", "c")
        g.add_edge("a", "b")
        g.add_edge("b", "a")
        assert [(e.from_id, e.to_id) for e in g.edges()] == [("b", "c"), ("a", "b"), ("b", "a")]

    def test_parallel_edges(self):
        g = _graph("a", "b")
        g.add_edge("a", "b", "one")
        g.add_edge("a", "b", "two")
        assert g.edge_count() == 2
        assert [e.label for e in g.edges()] == ["one", "two"]

    def test_empty_label_stored_as_none(self):
        g = _graph("a", "b")
        assert g.add_edge("a", "b", "").label is None

    def test_unknown_endpoint(self):
        g = _graph("a")
        with pytest.raises(KeyError):
            g.add_edge("a", "missing")


class TestInternalIds:
    def test_flow_prefix(self):
        g = _graph("x", "y")
        g.assign_internal_ids()
        assert [n.internal_id for n in g.nodes()] == ["f0", "f1"]
        assert g.internal_id("y") == "f1"

    def test_tree_prefix(self):
        g = _graph("/r", "/r/a", kind=GraphKind.Tree)
        g.assign_internal_ids()
        assert [n.internal_id for n in g.nodes()] == ["n0", "n1"]

    def test_unassigned(self):
        with pytest.raises(RuntimeError):
            _graph("a").internal_id("a")
