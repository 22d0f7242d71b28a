"""Shortest-path service - Main orchestrator.

Loads the graph through the repository port, resolves the endpoint
names to vertex indices, runs the solver port and formats the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import SolverConfig, get_config
from ..domain.errors import (
    ConfigurationError,
    GraphParseError,
    MinPathError,
    NoPathFoundError,
    VertexNotFoundError,
)
from ..domain.models import PathResult
from ..graph.store import Graph
from ..ports.graph import GraphRepositoryPort, PathSolverPort
from ..ports.rendering import PathFormatterPort


@dataclass
class ShortestPathService:
    """Main service for answering a source-to-target query.

    This service orchestrates:
    1. Graph loading
    2. Endpoint resolution (inserting missing endpoints if configured)
    3. Path computation
    4. Formatting

    Attributes:
        graph_repository: Loads the graph
        path_solver: Computes shortest paths
        formatter: Renders results as text lines
        config: Default endpoints and missing-endpoint policy
    """

    graph_repository: GraphRepositoryPort
    path_solver: PathSolverPort
    formatter: Optional[PathFormatterPort] = None
    config: SolverConfig = field(default_factory=lambda: get_config().solver)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self, source: Optional[str] = None, target: Optional[str] = None
    ) -> Tuple[Graph, PathResult]:
        """Compute the minimum-cost path between two named vertices.

        Args:
            source: Source vertex name (defaults to the configured one).
            target: Target vertex name (defaults to the configured one).

        Returns:
            The graph the search ran on and the computed path.

        Raises:
            InputReadError: If the graph file cannot be read.
            GraphParseError: If the graph file is malformed.
            ConfigurationError: If an endpoint name is not a valid token.
            VertexNotFoundError: If an endpoint is missing and insertion is off.
            NoPathFoundError: If the target is unreachable.
        """
        source = self.config.source if source is None else source
        target = self.config.target if target is None else target

        self._logger.info(
            "Starting path search",
            extra={"source": source, "target": target},
        )

        graph = self.graph_repository.load()
        graph, start, end = self.resolve_endpoints(graph, source, target)

        result = self.path_solver.solve(graph, start, end)
        self._logger.info(
            "Path computed",
            extra={"stops": result.num_stops, "cost": result.cost},
        )
        return graph, result

    def solve_safe(
        self, source: Optional[str] = None, target: Optional[str] = None
    ) -> Tuple[Optional[Tuple[Graph, PathResult]], Optional[str]]:
        """Compute the path, returning a diagnostic instead of raising.

        Args:
            source: Source vertex name (defaults to the configured one).
            target: Target vertex name (defaults to the configured one).

        Returns:
            Tuple of ((graph, path) or None, diagnostic or None).
        """
        try:
            return self.solve(source, target), None
        except MinPathError as e:
            return None, describe_error(e)

    def resolve_endpoints(
        self, graph: Graph, source: str, target: str
    ) -> Tuple[Graph, int, int]:
        """Map endpoint names to vertex indices.

        Missing endpoints are appended as isolated vertices when
        ``insert_missing_endpoints`` is set, so the solver then reports
        that no path exists. Insertion happens on a copy; the graph
        passed in is never modified.
        """
        indices = []
        copied = False
        for setting, name in (("source", source), ("target", target)):
            if not name or any(ch.isspace() for ch in name):
                raise ConfigurationError(
                    f"Invalid {setting} vertex name: {name!r}",
                    setting_name=f"solver.{setting}",
                    expected_type="non-empty name without whitespace",
                )

            index = graph.get_node(name)
            if index is None:
                if not self.config.insert_missing_endpoints:
                    raise VertexNotFoundError(
                        f"Vertex not found in graph: '{name}'",
                        name=name,
                    )
                if not copied:
                    graph = graph.copy()
                    copied = True
                index = graph.get_or_insert_node(name)
                self._logger.debug(
                    "Inserted missing endpoint",
                    extra={"vertex": name, "index": index},
                )
            indices.append(index)

        return graph, indices[0], indices[1]

    def format_result(self, graph: Graph, result: PathResult) -> List[str]:
        """Format a path result as output lines."""
        if self.formatter is None:
            raise ConfigurationError(
                "No path formatter configured",
                setting_name="formatter",
            )
        return list(self.formatter.render(graph, result))


def describe_error(error: MinPathError) -> str:
    """Return the one-line diagnostic printed for a domain error."""
    if isinstance(error, GraphParseError):
        return "Failed to parse input graph"
    if isinstance(error, NoPathFoundError):
        return error.message
    return str(error)
