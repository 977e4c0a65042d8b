"""Intermediate representation: the ordered diagram graph."""

from flowdiag.ir.graph import DiagramGraph, EdgeData, NodeData

__all__ = [
    "DiagramGraph",
    "EdgeData",
    "NodeData",
]
