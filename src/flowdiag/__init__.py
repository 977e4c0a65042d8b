"""flowdiag: directory trees and flow specs to Mermaid or Graphviz DOT text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from flowdiag.config import FlowInputs, TreeOptions
from flowdiag.parsers import build_flow_graph, load_flow_graph
from flowdiag.renderers import emit
from flowdiag.tree import build_tree_graph
from flowdiag.types import OutputFormat


def render_flow(lines: Iterable[str], fmt: str = "mermaid", title: str | None = None) -> str:
    """Turn flow spec (or plain entry) lines into diagram text.

    Args:
        lines: Raw lines; blank lines and '#' comments are ignored.
        fmt: 'mermaid' or 'dot'.
        title: Optional Mermaid comment / DOT graph label.

    Returns:
        The diagram text, newline-terminated.

    Raises:
        DiagramError: If a line cannot be parsed, no input remains, or fmt is unknown.
    """
    output_format = OutputFormat.parse(fmt)
    return emit(build_flow_graph(lines), output_format, title)


def generate_flow(
    inputs: FlowInputs,
    fmt: str = "mermaid",
    title: str | None = None,
    stdin: TextIO | None = None,
) -> str:
    """Resolve flow-mode inputs (entries, spec lines, files, stdin) to diagram text."""
    output_format = OutputFormat.parse(fmt)
    return emit(load_flow_graph(inputs, stdin), output_format, title)


def generate_tree(options: TreeOptions, fmt: str = "mermaid", title: str | None = None) -> str:
    """Scan a directory tree and return it as diagram text."""
    output_format = OutputFormat.parse(fmt)
    return emit(build_tree_graph(options), output_format, title)


__all__ = [
    "FlowInputs",
    "TreeOptions",
    "generate_flow",
    "generate_tree",
    "render_flow",
]
