"""Plain-text path formatter.

Renders a PathResult as two lines::

    Located a minimum path of cost: 11
    a (0) -> c (2) -> b (3) -> d (8) -> z (11)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain.models import PathResult
from ...graph.store import Graph


@dataclass(frozen=True)
class TextPathFormatter:
    """Path formatter producing the cost line and the arrow line.

    This adapter implements PathFormatterPort.
    """

    separator: str = " -> "

    def render(self, graph: Graph, result: PathResult) -> List[str]:
        return [self.format_cost(result), self.format_path(graph, result)]

    @staticmethod
    def format_cost(result: PathResult) -> str:
        return f"Located a minimum path of cost: {result.cost}"

    def format_path(self, graph: Graph, result: PathResult) -> str:
        steps = []
        for node, distance in result.steps():
            name = graph.get_node_name(node)
            if name is None:
                raise IndexError(f"Vertex index out of range: {node}")
            steps.append(f"{name} ({distance})")
        return self.separator.join(steps)
