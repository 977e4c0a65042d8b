"""Flow input dispatch — gather lines from the configured sources and pick a parser."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from flowdiag.config import FlowInputs
from flowdiag.errors import ConflictingInputSources, NoInputProvided, PromptUnavailable
from flowdiag.ir.graph import DiagramGraph
from flowdiag.parsers.base import LineSource
from flowdiag.parsers.flowspec import EDGE_ARROW, build_entry_chain, parse_flow_spec
from flowdiag.parsers.lines import (
    CsvEntries,
    ExplicitLines,
    FileLines,
    PipedLines,
    PromptLines,
    clean_entries,
    clean_lines,
    read_all,
)

logger = logging.getLogger(__name__)


def detect_type(lines: list[str]) -> str:
    """Return 'spec' if any line declares an edge, else 'entries'."""
    if any(EDGE_ARROW in line for line in lines):
        return "spec"
    return "entries"


def build_flow_graph(raw_lines: Iterable[str]) -> DiagramGraph:
    """Filter raw lines and build either a flow spec graph or an entry chain."""
    lines = clean_lines(raw_lines)
    if not lines:
        raise NoInputProvided("No flow input provided.")
    if detect_type(lines) == "spec":
        return parse_flow_spec(lines)
    return build_entry_chain(lines)


def entry_sources(inputs: FlowInputs) -> list[LineSource]:
    sources: list[LineSource] = [ExplicitLines(list(inputs.entries))]
    if inputs.entries_csv:
        sources.append(CsvEntries(inputs.entries_csv))
    if inputs.entries_file:
        sources.append(FileLines(inputs.entries_file, kind="Entries"))
    return sources


def spec_sources(inputs: FlowInputs) -> list[LineSource]:
    sources: list[LineSource] = [ExplicitLines(list(inputs.spec_lines))]
    sources.extend(FileLines(path) for path in inputs.spec_files)
    return sources


def stdin_source(inputs: FlowInputs, stdin: TextIO, have_lines: bool) -> LineSource | None:
    """The prompt when asked for, else stdin when nothing else produced lines."""
    interactive = stdin.isatty()
    if inputs.prompt:
        if not interactive:
            raise PromptUnavailable("Cannot prompt for entries: stdin is not a TTY.")
        return PromptLines(stdin)
    if have_lines:
        return None
    return PromptLines(stdin) if interactive else PipedLines(stdin)


def load_flow_graph(inputs: FlowInputs, stdin: TextIO | None = None) -> DiagramGraph:
    """Resolve the flow-mode inputs into a graph."""
    if inputs.has_entry_sources() and inputs.has_spec_sources():
        raise ConflictingInputSources("Cannot mix entry-based flow inputs with flow spec inputs.")

    if inputs.has_entry_sources():
        entries = clean_entries(read_all(entry_sources(inputs)))
        logger.debug("building entry chain from %d entries", len(entries))
        return build_entry_chain(entries)

    raw_lines = read_all(spec_sources(inputs))
    extra = stdin_source(inputs, stdin if stdin is not None else sys.stdin, bool(raw_lines))
    if extra is not None:
        raw_lines.extend(extra.read_lines())
    logger.debug("read %d raw flow lines", len(raw_lines))
    return build_flow_graph(raw_lines)


__all__ = [
    "build_flow_graph",
    "detect_type",
    "load_flow_graph",
]
