"""Tests for flowdiag.parsers.flowspec — node tokens, target splitting, and the builder."""

import pytest

from flowdiag.errors import InvalidNodeId, MalformedEdgeLine, NoInputProvided
from flowdiag.parsers.flowspec import (
    FlowBuilder,
    build_entry_chain,
    parse_flow_spec,
    parse_node_expr,
    split_targets,
)
from flowdiag.types import NodeShape


def _edges(graph):
    return [(e.from_id, e.to_id, e.label) for e in graph.edges()]


class TestParseNodeExpr:
    def test_bare_id(self):
        expr = parse_node_expr("start")
        assert expr.id == "start"
        assert expr.label == ""
        assert expr.shape is None

    def test_box(self):
        expr = parse_node_expr("a[ Hello world ]")
        assert (expr.id, expr.label, expr.shape) == ("a", "Hello world", NodeShape.Box)

    def test_diamond(self):
        expr = parse_node_expr("ok{Valid?}")
        assert (expr.id, expr.label, expr.shape) == ("ok", "Valid?", NodeShape.Diamond)

    def test_circle_beats_paren(self):
        expr = parse_node_expr("end((Done))")
        assert (expr.id, expr.label, expr.shape) == ("end", "Done", NodeShape.Circle)

    def test_stadium_beats_box(self):
        expr = parse_node_expr("s([Begin])")
        assert (expr.id, expr.label, expr.shape) == ("s", "Begin", NodeShape.Stadium)

    def test_dotted_and_dashed_ids(self):
        assert parse_node_expr("v1.2-rc_3[Release]").id == "v1.2-rc_3"

    def test_unclosed_bracket_is_returned_whole(self):
        expr = parse_node_expr("a[oops")
        assert expr.id == "a[oops"
        assert expr.shape is None


class TestSplitTargets:
    def test_simple(self):
        assert split_targets("a, b,c") == ["a", "b", "c"]

    def test_comma_inside_brackets(self):
        assert split_targets("a[x, y], b") == ["a[x, y]", "b"]

    def test_comma_inside_braces_and_parens(self):
        assert split_targets("q{yes, no}, r((1, 2)), s([p, q])") == ["q{yes, no}", "r((1, 2))", "s([p, q])"]

    def test_empty_segments_dropped(self):
        assert split_targets(" a, , b ,") == ["a", "b"]

    def test_empty_string(self):
        assert split_targets("") == []


class TestRegistration:
    def test_bare_mention_never_erases_label(self):
        builder = FlowBuilder()
        builder.add_line("a")
        builder.add_line("a[Hello]")
        builder.add_line("a")
        node = builder.graph.node("a")
        assert node.label == "Hello"
        assert node.shape == NodeShape.Box

    def test_last_non_empty_label_wins(self):
        builder = FlowBuilder()
        builder.add_line("a[First]")
        builder.add_line("a{Second}")
        node = builder.graph.node("a")
        assert node.label == "Second"
        assert node.shape == NodeShape.Diamond

    def test_colon_declaration(self):
        builder = FlowBuilder()
        builder.add_line("review :  Peer review")
        node = builder.graph.node("review")
        assert node.label == "Peer review"
        assert node.shape == NodeShape.Box

    def test_colon_declaration_resets_shape_to_box(self):
        builder = FlowBuilder()
        builder.add_line("a((Round))")
        builder.add_line("a: Square")
        assert builder.graph.node("a").shape == NodeShape.Box

    def test_invalid_id_with_space(self):
        builder = FlowBuilder()
        with pytest.raises(InvalidNodeId, match="a b"):
            builder.add_line("a b[Label]")

    def test_invalid_id_in_edge_target(self):
        with pytest.raises(InvalidNodeId):
            parse_flow_spec(["a -> b c"])

    def test_empty_id(self):
        builder = FlowBuilder()
        with pytest.raises(InvalidNodeId):
            builder.register("")


class TestEdgeLines:
    def test_fan_out_shares_label(self):
        graph = parse_flow_spec(["start -> a, b | GO"])
        assert _edges(graph) == [("start", "a", "GO"), ("start", "b", "GO")]
        for node_id in ("start", "a", "b"):
            node = graph.node(node_id)
            assert node.label == node_id
            assert node.shape == NodeShape.Box

    def test_shaped_nodes_in_edges(self):
        graph = parse_flow_spec(["s([Begin]) -> check{OK?}", "check -> done((Done)) | yes"])
        assert graph.node("s").shape == NodeShape.Stadium
        assert graph.node("check").label == "OK?"
        assert graph.node("done").shape == NodeShape.Circle
        assert _edges(graph) == [("s", "check", None), ("check", "done", "yes")]

    def test_label_keeps_later_pipes(self):
        graph = parse_flow_spec(["a -> b | x | y"])
        assert graph.edges()[0].label == "x | y"

    def test_parallel_edges_preserved(self):
        graph = parse_flow_spec(["a -> b", "a -> b | again", "b -> a"])
        assert _edges(graph) == [("a", "b", None), ("a", "b", "again"), ("b", "a", None)]

    def test_self_loop(self):
        graph = parse_flow_spec(["retry -> retry | again"])
        assert _edges(graph) == [("retry", "retry", "again")]

    def test_missing_left(self):
        with pytest.raises(MalformedEdgeLine, match="Invalid edge line"):
            parse_flow_spec(["-> b"])

    def test_missing_right(self):
        with pytest.raises(MalformedEdgeLine):
            parse_flow_spec(["a ->"])

    def test_only_label_on_right(self):
        with pytest.raises(MalformedEdgeLine):
            parse_flow_spec(["a -> | lbl"])

    def test_node_only_lines_mixed_with_edges(self):
        graph = parse_flow_spec(["x: Lonely", "a -> b"])
        assert [n.id for n in graph.nodes()] == ["x", "a", "b"]
        assert graph.edge_count() == 1


class TestInternalIds:
    def test_first_seen_order(self):
        graph = parse_flow_spec(["b -> c", "a -> b", "c: See"])
        assert [(n.id, n.internal_id) for n in graph.nodes()] == [("b", "f0"), ("c", "f1"), ("a", "f2")]

    def test_empty_spec_rejected(self):
        with pytest.raises(NoInputProvided):
            parse_flow_spec([])


class TestEntryChain:
    def test_chain(self):
        graph = build_entry_chain(["Draft", "Review", "Publish"])
        assert [n.label for n in graph.nodes()] == ["Draft", "Review", "Publish"]
        assert [n.internal_id for n in graph.nodes()] == ["f0", "f1", "f2"]
        assert _edges(graph) == [("step0", "step1", None), ("step1", "step2", None)]

    def test_single_entry_has_no_edges(self):
        graph = build_entry_chain(["Only"])
        assert graph.node_count() == 1
        assert graph.edge_count() == 0

    def test_no_entries(self):
        with pytest.raises(NoInputProvided, match="No entries"):
            build_entry_chain([])
