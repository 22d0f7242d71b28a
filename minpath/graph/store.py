"""Adjacency-list graph store.

Vertices are identified by dense zero-based indices assigned in
first-seen order. A side table maps display names to indices so that
the text loader can insert-or-lookup by name while the solver only
ever deals with integers.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.models import Edge


class Graph:
    """Undirected weighted graph over named vertices.

    Each undirected edge is stored as two ``Edge`` entries, one in the
    adjacency list of each endpoint. Parallel edges and self-loops are
    kept as they are added.
    """

    def __init__(self) -> None:
        self._nodes: List[str] = []
        self._adjacency: List[List[Edge]] = []
        self._index: Dict[str, int] = {}
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self._edge_count})"

    @property
    def nodes(self) -> Tuple[str, ...]:
        """Vertex names in index order."""
        return tuple(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges added so far."""
        return self._edge_count

    def copy(self) -> Graph:
        """Return an independent graph with the same vertices and edges."""
        clone = Graph()
        clone._nodes = list(self._nodes)
        clone._adjacency = [list(edges) for edges in self._adjacency]
        clone._index = dict(self._index)
        clone._edge_count = self._edge_count
        return clone

    def get_node(self, name: str) -> Optional[int]:
        """Return the index of ``name``, or None if it is not a vertex."""
        return self._index.get(name)

    def get_node_name(self, index: int) -> Optional[str]:
        """Return the display name of ``index``, or None if out of range."""
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def get_or_insert_node(self, name: str) -> int:
        """Return the index of ``name``, appending a new vertex if needed."""
        index = self._index.get(name)
        if index is not None:
            return index

        index = len(self._nodes)
        self._nodes.append(name)
        self._adjacency.append([])
        self._index[name] = index
        return index

    def add_bidirectional_edge(self, src: int, dest: int, cost: int) -> None:
        """Add an undirected edge of weight ``cost`` between two vertices.

        Raises:
            IndexError: If either endpoint is not a vertex index.
        """
        for index in (src, dest):
            if not 0 <= index < len(self._nodes):
                raise IndexError(f"Vertex index out of range: {index}")

        self._adjacency[src].append(Edge(node=dest, cost=cost))
        self._adjacency[dest].append(Edge(node=src, cost=cost))
        self._edge_count += 1

    def neighbors(self, index: int) -> Tuple[Edge, ...]:
        """Return the adjacency entries of ``index`` in insertion order."""
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"Vertex index out of range: {index}")
        return tuple(self._adjacency[index])
