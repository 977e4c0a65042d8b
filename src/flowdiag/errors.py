"""Exceptions raised by flowdiag.

Every error is fatal: it is raised where the problem is detected and only the
CLI turns it into a message on stderr and a non-zero exit status.
"""


class DiagramError(Exception):
    """Base exception for all flowdiag errors."""


class FlowSpecError(DiagramError, ValueError):
    """Raised when a flow spec line cannot be parsed."""


class InvalidNodeId(FlowSpecError):
    """Raised when a node id is empty or not a simple identifier."""


class MalformedEdgeLine(FlowSpecError):
    """Raised when an edge line is missing its left or right side."""


class NoInputProvided(DiagramError):
    """Raised when no usable lines or entries remain after filtering."""


class ConflictingInputSources(DiagramError):
    """Raised when entry-style and spec-style inputs are both supplied."""


class MissingInputFile(DiagramError):
    """Raised when an entries or flow spec file does not exist."""


class UnreadableInputFile(DiagramError):
    """Raised when an entries or flow spec file is not valid UTF-8."""


class PromptUnavailable(DiagramError):
    """Raised when prompting is requested but stdin is not a terminal."""


class UnsupportedMode(DiagramError):
    pass


class UnsupportedFormat(DiagramError):
    pass


class InvalidRenderOptions(DiagramError):
    """Raised for inconsistent --render / --render-out / --render-only usage."""


class InvalidOptions(DiagramError):
    """Raised for tree options that cannot be combined or are out of range."""


class InvalidTreeRoot(DiagramError):
    pass


class InvalidPattern(DiagramError):
    """Raised when an include or exclude regex does not compile."""


class RendererUnavailable(DiagramError):
    """Raised when mmdc or dot cannot be found on PATH."""


class RendererFailed(DiagramError):
    """Raised when the external renderer exits non-zero or writes nothing."""
