"""
Dependency ordering for directed graphs.

Three-colour depth-first search: WHITE vertices are unvisited, GRAY ones are
on the current DFS path, BLACK ones are finished. Reaching a GRAY vertex
means the edge just followed closes a cycle. Finished vertices are collected
in post-order and reversed, so every edge u -> v has u before v.
"""

from enum import Enum
import logging
from typing import Dict, Iterator, List, Tuple

from errors import CycleDetectedError, NotDirectedError
from graph import Graph, Vertex

logger = logging.getLogger(__name__)


class Color(Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def topological_sort(graph: Graph) -> List[Vertex]:
    """
    Order the vertices of a directed graph so every edge points forward.

    Roots are tried in `graph.vertices()` order. The walk keeps its own stack
    of neighbour iterators, so long dependency chains do not hit the
    interpreter's recursion limit.

    Raises:
        NotDirectedError: the graph is undirected.
        CycleDetectedError: the graph has a cycle; `edge` holds the back-edge
            that revealed it.
    """
    if not graph.is_directed():
        raise NotDirectedError("Topological sort requires a directed graph")

    color: Dict[Vertex, Color] = {v: Color.WHITE for v in graph.vertices()}
    finished: List[Vertex] = []

    for root in graph.vertices():
        if color[root] is not Color.WHITE:
            continue

        color[root] = Color.GRAY
        stack: List[Tuple[Vertex, Iterator[Vertex]]] = [(root, iter(graph.neighbors(root)))]
        while stack:
            vertex, pending = stack[-1]
            for neighbor in pending:
                state = color.get(neighbor, Color.WHITE)
                if state is Color.GRAY:
                    logger.warning("Cycle detected via edge %r -> %r", vertex, neighbor)
                    raise CycleDetectedError(
                        f"Cycle detected involving vertex: {neighbor!r}",
                        edge=(vertex, neighbor),
                    )
                if state is Color.WHITE:
                    color[neighbor] = Color.GRAY
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
            else:
                # every neighbour handled
                stack.pop()
                color[vertex] = Color.BLACK
                finished.append(vertex)

    finished.reverse()
    return finished
