"""Line sources and the line tokenizer.

A source is anything that yields raw text lines: explicit values from the
command line, files, an interactive prompt, or piped standard input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

import click

from flowdiag.errors import MissingInputFile, UnreadableInputFile
from flowdiag.parsers.base import LineSource

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = "Enter flow lines (edges like 'A -> B', or entries one per line). Blank line to finish:"


@dataclass
class ExplicitLines:
    """Values given directly, e.g. repeated --flow-spec; embedded newlines split."""

    values: list[str] = field(default_factory=list)

    def read_lines(self) -> list[str]:
        lines: list[str] = []
        for value in self.values:
            lines.extend(value.split("\n"))
        return lines


@dataclass
class FileLines:
    path: str
    kind: str = "Flow spec"

    def read_lines(self) -> list[str]:
        p = Path(self.path)
        if not p.is_file():
            raise MissingInputFile(f"{self.kind} file not found: {self.path}")
        logger.debug("reading %s file %s", self.kind.lower(), p)
        try:
            return p.read_text(encoding="utf-8").splitlines()
        except UnicodeDecodeError as e:
            raise UnreadableInputFile(f"{self.kind} file is not valid UTF-8: {self.path}") from e


@dataclass
class PromptLines:
    """Interactive entry: one line at a time until the first blank line."""

    stream: TextIO

    def read_lines(self) -> list[str]:
        click.echo(PROMPT_MESSAGE, err=True)
        lines: list[str] = []
        for raw in self.stream:
            line = raw.strip()
            if not line:
                break
            lines.append(line)
        return lines


@dataclass
class PipedLines:
    stream: TextIO

    def read_lines(self) -> list[str]:
        return self.stream.read().splitlines()


@dataclass
class CsvEntries:
    """A comma-separated --entries value."""

    value: str

    def read_lines(self) -> list[str]:
        return self.value.split(",")


def read_all(sources: Iterable[LineSource]) -> list[str]:
    """Concatenate the lines of every source, in order."""
    lines: list[str] = []
    for source in sources:
        lines.extend(source.read_lines())
    return lines


def clean_lines(lines: Iterable[str]) -> list[str]:
    """Trim lines and drop blank lines and '#' comments."""
    result: list[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        result.append(line)
    return result


def clean_entries(entries: Iterable[str]) -> list[str]:
    """Trim entries and drop blank ones; entries are literal labels, '#' included."""
    return [e.strip() for e in entries if e.strip()]
