"""Graph loading from edge-list text.

The input grammar is one undirected edge per line::

    SRC DEST COST

where ``SRC`` and ``DEST`` are vertex names without whitespace and
``COST`` is a non-negative decimal integer that fits an unsigned
64-bit word. The whole text is trimmed first; the first occurrence of
a name fixes its vertex index.
"""

from typing import List, Tuple

from ..domain.errors import GraphParseError
from .store import Graph

MAX_COST = 2**64 - 1


def parse_edge(line: str, line_number: int = 0) -> Tuple[str, str, int]:
    """Split one input line into ``(src, dest, cost)``.

    Raises:
        GraphParseError: If the line does not have exactly three tokens
            or the cost is not an unsigned integer in range.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise GraphParseError(
            f"Expected 'SRC DEST COST', got {len(tokens)} token(s)",
            line_number=line_number,
            line=line,
        )

    src, dest, cost_token = tokens
    # int() alone would accept signs, underscores and non-ASCII digits
    if not (cost_token.isascii() and cost_token.isdigit()):
        raise GraphParseError(
            f"Cost is not a non-negative integer: {cost_token!r}",
            line_number=line_number,
            line=line,
        )

    cost = int(cost_token)
    if cost > MAX_COST:
        raise GraphParseError(
            f"Cost does not fit an unsigned 64-bit integer: {cost_token}",
            line_number=line_number,
            line=line,
        )

    return src, dest, cost


def parse_edges(text: str) -> List[Tuple[str, str, int]]:
    """Parse every line of ``text`` into edge triples.

    Blank lines inside the trimmed text are rejected.
    """
    text = text.strip()
    if not text:
        return []

    return [
        parse_edge(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
    ]


def load_graph(text: str) -> Graph:
    """Build a graph from edge-list text.

    Raises:
        GraphParseError: If any line is malformed.
    """
    graph = Graph()

    for src, dest, cost in parse_edges(text):
        src_index = graph.get_or_insert_node(src)
        dest_index = graph.get_or_insert_node(dest)
        graph.add_bidirectional_edge(src_index, dest_index, cost)

    return graph
