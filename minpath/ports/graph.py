"""Graph ports - Abstractions for graph loading and path solving.

These protocols define the contracts between the shortest-path service
and the adapters that load graphs and run the search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for reading and caching the graph
    from persistent storage.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            A freshly built graph, or the cached one on later calls.
        """
        ...


class PathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, source: int, target: int) -> PathResult:
        """Find a minimum-cost path between two vertex indices.

        Args:
            graph: The graph to search; it is not modified.
            source: Index of the source vertex.
            target: Index of the target vertex.

        Returns:
            The path with its cumulative distances.
        """
        ...

    def solve_safe(
        self, graph: Graph, source: int, target: int
    ) -> Optional[PathResult]:
        """Like solve(), returning None when the target is unreachable."""
        ...
