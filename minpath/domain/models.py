"""Immutable domain models for minpath.

All models are frozen dataclasses with slots. They carry vertex
indices only and borrow nothing else from the graph they came from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """One directed adjacency entry of an undirected edge.

    Attributes:
        node: Index of the neighbouring vertex
        cost: Non-negative integer weight of the edge
    """

    node: int
    cost: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """A minimum-cost path between two vertices.

    ``distance[i]`` is the cumulative cost of the prefix ending at
    ``path[i]``, so ``distance[0] == 0`` and ``distance[-1] == cost``.

    Attributes:
        cost: Total cost of the path
        path: Vertex indices from source to target, inclusive
        distance: Cumulative distances aligned with ``path``
    """

    cost: int
    path: tuple[int, ...]
    distance: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate the alignment of path and distance."""
        if not self.path:
            raise ValueError("A path must contain at least the source vertex")
        if len(self.path) != len(self.distance):
            raise ValueError(
                f"Path and distance lengths differ: {len(self.path)} != {len(self.distance)}"
            )
        if self.distance[0] != 0 or self.distance[-1] != self.cost:
            raise ValueError(
                f"Distances must run from 0 to {self.cost}, got {self.distance}"
            )

    @property
    def source(self) -> int:
        return self.path[0]

    @property
    def target(self) -> int:
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.path)

    def steps(self) -> tuple[tuple[int, int], ...]:
        """Return ``(vertex, cumulative distance)`` pairs in path order."""
        return tuple(zip(self.path, self.distance))
