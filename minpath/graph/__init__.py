"""Graph-related utilities.

This subpackage contains the adjacency-list graph store, the loader
that builds it from edge-list text, and the Dijkstra shortest-path
search that runs on top of it.
"""

from .dijkstra import find_shortest_path, reconstruct_path, shortest_path_tree
from .load_graph import MAX_COST, load_graph, parse_edge, parse_edges
from .store import Graph

__all__ = [
    "Graph",
    "MAX_COST",
    "load_graph",
    "parse_edge",
    "parse_edges",
    "find_shortest_path",
    "reconstruct_path",
    "shortest_path_tree",
]
