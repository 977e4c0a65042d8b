"""Graph IR — the in-memory diagram handed from the builders to the emitters.

Wraps a networkx MultiDiGraph. Node order is first-seen order (networkx keeps
insertion order for nodes); edge order is declaration order, tracked with a
sequence number since a MultiDiGraph groups edges by source node.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from flowdiag.types import GraphKind, NodeShape, NodeStyle


@dataclass
class NodeData:
    id: str
    label: str
    shape: NodeShape = NodeShape.Box
    style: NodeStyle = NodeStyle.Step
    internal_id: str | None = None


@dataclass
class EdgeData:
    from_id: str
    to_id: str
    label: str | None = None
    seq: int = 0


class DiagramGraph:
    """Ordered nodes plus ordered, possibly parallel, edges."""

    def __init__(self, kind: GraphKind = GraphKind.Flow) -> None:
        self.kind = kind
        self.digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        self._edge_seq = 0

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.digraph

    def add_node(self, data: NodeData) -> NodeData:
        """Insert a node, or return the existing record for its id."""
        if data.id in self.digraph:
            return self.digraph.nodes[data.id]["data"]
        self.digraph.add_node(data.id, data=data)
        return data

    def node(self, node_id: str) -> NodeData:
        return self.digraph.nodes[node_id]["data"]

    def add_edge(self, from_id: str, to_id: str, label: str | None = None) -> EdgeData:
        """Append an edge; both endpoints must already be registered."""
        if from_id not in self.digraph or to_id not in self.digraph:
            raise KeyError(f"edge {from_id!r} -> {to_id!r} references an unknown node")
        data = EdgeData(from_id=from_id, to_id=to_id, label=label or None, seq=self._edge_seq)
        self._edge_seq += 1
        self.digraph.add_edge(from_id, to_id, data=data)
        return data

    def nodes(self) -> list[NodeData]:
        return [attrs["data"] for _, attrs in self.digraph.nodes(data=True)]

    def edges(self) -> list[EdgeData]:
        edges = [attrs["data"] for _, _, attrs in self.digraph.edges(data=True)]
        edges.sort(key=lambda e: e.seq)
        return edges

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def assign_internal_ids(self) -> None:
        """Number nodes in first-seen order: f0, f1, ... (flow) or n0, n1, ... (tree)."""
        prefix = self.kind.id_prefix
        for index, node in enumerate(self.nodes()):
            node.internal_id = f"{prefix}{index}"

    def internal_id(self, node_id: str) -> str:
        internal = self.node(node_id).internal_id
        if internal is None:
            raise RuntimeError("internal ids have not been assigned")
        return internal
