"""Shared type definitions for flowdiag.

Enums used across parsers, IR, the tree scanner, and emitters.
"""

from __future__ import annotations

from enum import Enum

from flowdiag.errors import UnsupportedFormat, UnsupportedMode


class Mode(Enum):
    Tree = "tree"
    Flow = "flow"

    @classmethod
    def parse(cls, value: str) -> Mode:
        for mode in cls:
            if mode.value == value:
                return mode
        raise UnsupportedMode(f"Unsupported mode: {value}")


class OutputFormat(Enum):
    Mermaid = "mermaid"
    Dot = "dot"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise UnsupportedFormat(f"Unsupported format: {value}")

    @property
    def extension(self) -> str:
        return "mmd" if self is OutputFormat.Mermaid else "dot"


class NodeShape(Enum):
    Box = "box"  # id[Label]
    Diamond = "diamond"  # id{Label}
    Circle = "circle"  # id((Label))
    Stadium = "stadium"  # id([Label])


class NodeStyle(Enum):
    """Colour class a node is emitted with."""

    Step = "step"
    Dir = "dir"
    File = "file"


class GraphKind(Enum):
    Flow = "flow"
    Tree = "tree"

    @property
    def id_prefix(self) -> str:
        return "f" if self is GraphKind.Flow else "n"
