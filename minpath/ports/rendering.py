"""Rendering port - Abstraction for presenting a computed path.

This protocol defines the contract for turning a PathResult into
human-readable lines, allowing other presentations to be plugged in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import Graph


class PathFormatterPort(Protocol):
    """Port for path formatting.

    Implementation: adapters/rendering/text_formatter.py
    """

    def render(self, graph: Graph, result: PathResult) -> Sequence[str]:
        """Render a path as output lines.

        Args:
            graph: The graph the path was computed on, for vertex names.
            result: The computed path.

        Returns:
            Lines to print, without trailing newlines.
        """
        ...
