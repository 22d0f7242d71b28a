"""Text graph repository adapter.

This adapter wraps graph/load_graph.py and adds:
- Configuration injection (input path and encoding)
- Caching of the loaded graph
- Typed errors for unreadable and malformed input
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import InputReadError
from ...graph.load_graph import load_graph
from ...graph.store import Graph


@dataclass
class TextGraphRepository:
    """Graph repository that loads an edge-list text file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (input path, encoding)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from the configured text file.

        Returns:
            The parsed graph.

        Raises:
            InputReadError: If the file cannot be read.
            GraphParseError: If a line is malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={"input_file": str(self.config.input_file)},
        )

        text = self.read_text()
        graph = load_graph(text)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": graph.edge_count},
        )
        return graph

    def read_text(self) -> str:
        """Read the raw input file.

        Raises:
            InputReadError: If the file cannot be opened or decoded.
        """
        try:
            return self.config.input_file.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(
                f"Failed to open '{self.config.input_file}'",
                file_path=str(self.config.input_file),
                cause=e,
            ) from e

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
