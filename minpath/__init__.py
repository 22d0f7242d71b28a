"""Top-level package for minpath.

minpath loads an undirected, non-negatively weighted graph from an
edge-list text file and reports a minimum-cost path between two named
vertices, together with the cumulative cost at every stop.
"""

__version__ = "0.1.0"
