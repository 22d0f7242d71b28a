"""Dijkstra path solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Typed NoPathFoundError instead of a None result
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import NoPathFoundError
from ...domain.models import PathResult
from ...graph.dijkstra import find_shortest_path
from ...graph.store import Graph


def _name(graph: Graph, index: int) -> str:
    name = graph.get_node_name(index)
    return name if name is not None else str(index)


@dataclass
class DijkstraPathSolver:
    """Path solver using Dijkstra's shortest path algorithm.

    This adapter implements PathSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: int, target: int) -> PathResult:
        """Find the minimum-cost path between two vertices.

        Args:
            graph: The graph to search.
            source: Index of the source vertex.
            target: Index of the target vertex.

        Returns:
            PathResult with the path and its cumulative distances.

        Raises:
            NoPathFoundError: If the target is unreachable.
            IndexError: If either index is not a vertex of the graph.
        """
        result = self.solve_safe(graph, source, target)

        if result is None:
            source_name = _name(graph, source)
            target_name = _name(graph, target)
            raise NoPathFoundError(
                f"There is no path from '{source_name}' to '{target_name}'.",
                source=source_name,
                target=target_name,
            )

        return result

    def solve_safe(
        self, graph: Graph, source: int, target: int
    ) -> Optional[PathResult]:
        """Find the minimum-cost path, returning None if there is none.

        Args:
            graph: The graph to search.
            source: Index of the source vertex.
            target: Index of the target vertex.

        Returns:
            PathResult, or None if the target is unreachable.
        """
        self._logger.debug(
            "Solving path",
            extra={"source": source, "target": target, "nodes": len(graph)},
        )

        result = find_shortest_path(graph, source, target)

        if result is None:
            self._logger.info(
                "No path found",
                extra={"source": source, "target": target},
            )
            return None

        self._logger.info(
            "Path found",
            extra={"stops": result.num_stops, "cost": result.cost},
        )
        return result
