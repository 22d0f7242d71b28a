"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads the graph from an edge-list text file
- DijkstraPathSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathSolver
from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository", "DijkstraPathSolver"]
