"""Directory tree scanner.

Walks a root directory to a bounded depth, filters the paths, and builds a
tree-flavoured DiagramGraph: one node per included path and an edge from each
path's immediate parent when that parent is included too. A path whose parent
was filtered out is left without an incoming edge; it is not reattached to a
higher ancestor.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

from flowdiag.config import TreeOptions
from flowdiag.errors import InvalidPattern, InvalidTreeRoot
from flowdiag.ir.graph import DiagramGraph, NodeData
from flowdiag.types import GraphKind, NodeStyle

logger = logging.getLogger(__name__)


@dataclass
class TreeEntry:
    path: str
    is_dir: bool
    included: bool = False


def walk(root: str, max_depth: int) -> Iterator[tuple[str, bool]]:
    """Yield (path, is_directory) for root and everything below it up to max_depth.

    Only real directories and regular files are reported; symlinks are skipped.
    """
    yield root, True
    if max_depth <= 0:
        return
    stack: list[tuple[str, int]] = [(root, 0)]
    while stack:
        directory, depth = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning("cannot read directory %s: %s", directory, e)
            continue
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield entry.path, True
                if depth + 1 < max_depth:
                    stack.append((entry.path, depth + 1))
            elif entry.is_file(follow_symlinks=False):
                yield entry.path, False


def _compile(pattern: str, what: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(f"Invalid {what} regex '{pattern}': {e}") from e


class PathFilter:
    """Decides which non-root paths make it into the diagram."""

    def __init__(self, options: TreeOptions) -> None:
        self.dirs_only = options.dirs_only
        self.files_only = options.files_only
        self.include = _compile(options.include, "include") if options.include else None
        self.excludes = [_compile(p, "exclude") for p in options.exclude_patterns()]

    def accepts(self, path: str, is_dir: bool) -> bool:
        if self.dirs_only and not is_dir:
            return False
        if self.files_only and is_dir:
            return False
        if self.include is not None and not self.include.search(path):
            return False
        return not any(p.search(path) for p in self.excludes)


def root_label(root_abs: str) -> str:
    name = os.path.basename(root_abs)
    return name or "/"


def scan_tree(options: TreeOptions) -> list[TreeEntry]:
    """Walk, sort and filter; returns every visited entry with its inclusion flag."""
    options.validate()
    if not os.path.isdir(options.root):
        raise InvalidTreeRoot(f"Root is not a directory: {options.root}")

    root_abs = os.path.abspath(options.root)
    path_filter = PathFilter(options)

    entries: list[TreeEntry] = []
    for path, is_dir in sorted(walk(root_abs, options.depth)):
        included = path == root_abs or path_filter.accepts(path, is_dir)
        entries.append(TreeEntry(path=path, is_dir=is_dir, included=included))

    logger.debug(
        "scanned %s: %d paths, %d included",
        root_abs,
        len(entries),
        sum(1 for e in entries if e.included),
    )
    return entries


def build_tree_graph(options: TreeOptions) -> DiagramGraph:
    """Scan the tree and turn the included paths into a diagram graph."""
    root_abs = os.path.abspath(options.root)
    entries = scan_tree(options)

    graph = DiagramGraph(kind=GraphKind.Tree)
    for entry in entries:
        if not entry.included:
            continue
        if entry.path == root_abs:
            label = root_label(root_abs)
        else:
            label = os.path.relpath(entry.path, root_abs)
        style = NodeStyle.Dir if entry.is_dir else NodeStyle.File
        graph.add_node(NodeData(id=entry.path, label=label, style=style))
    graph.assign_internal_ids()

    for entry in entries:
        if not entry.included or entry.path == root_abs:
            continue
        parent = os.path.dirname(entry.path)
        if parent in graph:
            graph.add_edge(parent, entry.path)

    return graph
