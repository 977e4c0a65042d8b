"""Centralized configuration for flowdiag."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from flowdiag.errors import InvalidOptions, InvalidRenderOptions
from flowdiag.types import OutputFormat

DEFAULT_EXCLUDE = r"(^|/)(\.git|node_modules|dist|build|\.next|\.cache)(/|$)"

MERMAID_RENDER_FORMATS = ("png", "svg", "pdf")

_RENDER_FORMAT_RE = re.compile(r"^[A-Za-z0-9]+$")


@dataclass
class TreeOptions:
    """Configuration for a directory tree scan."""

    root: str = "."
    depth: int = 3
    dirs_only: bool = False
    files_only: bool = False
    include: str | None = None
    exclude: str | None = None
    default_excludes: bool = True

    def validate(self) -> None:
        if self.dirs_only and self.files_only:
            raise InvalidOptions("--dirs-only and --files-only cannot be used together.")
        if self.depth < 0:
            raise InvalidOptions("Depth must be a non-negative integer.")

    def exclude_patterns(self) -> list[str]:
        """User exclude first, then the built-in one; any match drops a path."""
        patterns: list[str] = []
        if self.exclude:
            patterns.append(self.exclude)
        if self.default_excludes:
            patterns.append(DEFAULT_EXCLUDE)
        return patterns


@dataclass
class FlowInputs:
    """Flow-mode inputs. Entry sources and spec sources are mutually exclusive."""

    entries: list[str] = field(default_factory=list)
    entries_csv: str | None = None
    entries_file: str | None = None
    spec_lines: list[str] = field(default_factory=list)
    spec_files: list[str] = field(default_factory=list)
    prompt: bool = False

    def has_entry_sources(self) -> bool:
        return bool(self.entries or self.entries_csv or self.entries_file)

    def has_spec_sources(self) -> bool:
        return bool(self.spec_lines or self.spec_files)


@dataclass
class RenderOptions:
    """Configuration for handing emitted text to mmdc or dot."""

    image_format: str
    image_out: str | None = None
    render_only: bool = False

    @classmethod
    def from_flags(
        cls, image_format: str | None, image_out: str | None, render_only: bool
    ) -> RenderOptions | None:
        """Build options from CLI flags; None when rendering was not requested."""
        if image_format is None:
            if render_only:
                raise InvalidRenderOptions("--render-only requires --render FMT.")
            if image_out:
                raise InvalidRenderOptions("--render-out requires --render FMT.")
            return None
        return cls(image_format=image_format, image_out=image_out or None, render_only=render_only)

    def validate(self, fmt: OutputFormat) -> None:
        if not _RENDER_FORMAT_RE.match(self.image_format):
            raise InvalidRenderOptions(f"Invalid render format: {self.image_format}")
        if fmt is OutputFormat.Mermaid and self.image_format not in MERMAID_RENDER_FORMATS:
            raise InvalidRenderOptions("Mermaid render format must be png, svg, or pdf.")


@dataclass
class OutputOptions:
    """Where and how the diagram text is emitted."""

    format: OutputFormat = OutputFormat.Mermaid
    out_file: str | None = None
    title: str | None = None
    render: RenderOptions | None = None
