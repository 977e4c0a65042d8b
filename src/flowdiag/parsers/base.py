"""Base line source protocol."""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Protocol that all line sources must implement.

    The builders only ever see the ordered raw lines, never where they came from.
    """

    def read_lines(self) -> list[str]:
        """Return the raw (untrimmed) lines in order."""
        ...
