"""Shortest-path computation using Dijkstra's algorithm.

The search is the lazy-deletion variant over a binary heap: every
successful relaxation pushes a fresh ``(cost, vertex)`` entry and
outdated entries are dropped when popped, so no decrease-key is needed.
Heap entries are plain tuples, which orders them by cost first and by
vertex index second.
"""

import heapq
from typing import List, Optional, Tuple

from ..domain.models import PathResult
from .store import Graph

# distance[v] / parent[v] per vertex, None while unknown
Distances = List[Optional[int]]
Parents = List[Optional[int]]


def shortest_path_tree(graph: Graph, start: int) -> Tuple[Distances, Parents]:
    """Compute the shortest-path tree rooted at ``start``.

    Parameters
    ----------
    graph:
        Graph as produced by ``load_graph``.
    start:
        Index of the source vertex.

    Returns
    -------
    list[int | None], list[int | None]
        Best known distance from ``start`` to every vertex and the
        predecessor of every vertex on that path. Unreachable vertices
        keep ``None`` in both lists, and so does ``parent[start]``.
    """
    if not 0 <= start < len(graph):
        raise IndexError(f"Vertex index out of range: {start}")

    distance: Distances = [None] * len(graph)
    parent: Parents = [None] * len(graph)
    distance[start] = 0

    heap: List[Tuple[int, int]] = [(0, start)]

    while heap:
        cost, position = heapq.heappop(heap)

        # skip outdated entries
        best = distance[position]
        if best is not None and cost > best:
            continue

        for edge in graph.neighbors(position):
            next_cost = cost + edge.cost
            known = distance[edge.node]
            if known is None or next_cost < known:
                distance[edge.node] = next_cost
                parent[edge.node] = position
                heapq.heappush(heap, (next_cost, edge.node))

    return distance, parent


def reconstruct_path(
    distance: Distances, parent: Parents, start: int, end: int
) -> Optional[PathResult]:
    """Walk parent pointers back from ``end`` and build a PathResult.

    Returns None when ``end`` has no known distance.
    """
    cost = distance[end]
    if cost is None:
        return None

    path: List[int] = [end]
    node = end
    while parent[node] is not None:
        node = parent[node]  # type: ignore[assignment]
        path.append(node)

    # the walk stops at the root, which is start unless the tree is broken
    if path[-1] != start:
        path.append(start)
    path.reverse()

    dist = [distance[node] for node in path]
    if any(d is None for d in dist):
        raise ValueError(f"Parent chain of vertex {end} leaves the tree")

    return PathResult(cost=cost, path=tuple(path), distance=tuple(dist))  # type: ignore[arg-type]


def find_shortest_path(graph: Graph, start: int, end: int) -> Optional[PathResult]:
    """Compute a minimum-cost path from ``start`` to ``end``.

    Parameters
    ----------
    graph:
        Graph as produced by ``load_graph``; it is not modified.
    start:
        Index of the departure vertex.
    end:
        Index of the arrival vertex.

    Returns
    -------
    PathResult or None
        The path with its cumulative distances, or None if ``end`` is
        unreachable from ``start``.
    """
    if not 0 <= end < len(graph):
        raise IndexError(f"Vertex index out of range: {end}")

    if start == end:
        if not 0 <= start < len(graph):
            raise IndexError(f"Vertex index out of range: {start}")
        return PathResult(cost=0, path=(start,), distance=(0,))

    distance, parent = shortest_path_tree(graph, start)
    return reconstruct_path(distance, parent, start, end)
