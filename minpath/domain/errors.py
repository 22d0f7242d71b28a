"""Typed domain errors for minpath.

The graph store and the shortest-path core never raise for valid
input; they return optional results. These errors are raised by the
adapters and services so that each failure mode can be reported with
its own diagnostic at the command-line boundary.

All errors inherit from MinPathError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MinPathError(Exception):
    """Base error for the minpath domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InputReadError(MinPathError):
    """The graph input file could not be read.

    Attributes:
        file_path: Path to the input file
    """

    file_path: Optional[str] = None


@dataclass
class GraphParseError(MinPathError):
    """A line of the graph input does not follow ``SRC DEST COST``.

    Attributes:
        line_number: One-based line number inside the trimmed input
        line: The offending line
    """

    line_number: int = 0
    line: str = ""


@dataclass
class NoPathFoundError(MinPathError):
    """The target vertex is unreachable from the source vertex.

    Attributes:
        source: Source vertex name
        target: Target vertex name
    """

    source: str = ""
    target: str = ""


@dataclass
class VertexNotFoundError(MinPathError):
    """Vertex name not present in the graph.

    Attributes:
        name: The vertex name that was not found
    """

    name: str = ""


@dataclass
class ConfigurationError(MinPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
