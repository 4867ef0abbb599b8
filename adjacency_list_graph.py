"""
Weighted graph implementation for the engine backed by adjacency lists.

Implements the Graph interface with a vertex -> (neighbor -> weight) mapping.
Space is O(V + E), which suits sparse graphs.
"""

import logging
from typing import Dict, List, Optional

from config import DEFAULT_EDGE_WEIGHT
from errors import EdgeNotFoundError, UnknownVertexError
from graph import Edge, Vertex, check_vertex, check_weight

logger = logging.getLogger(__name__)


class AdjacencyListGraph:
    """
    Directed or undirected weighted graph backed by per-vertex outgoing maps.

    An undirected edge is stored as two directed entries sharing one weight
    (a self-loop as one entry). Neighbours enumerate in the order their
    edges were first added.
    """

    def __init__(self, directed: bool = True, default_weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, float]] = {}
        self._directed = bool(directed)
        self._default_weight = float(default_weight)
        # Logical edges; only touched next to the _adj writes below.
        self._edge_count = 0

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Ensure vertex exists in the graph."""
        check_vertex(vertex)
        self._adj.setdefault(vertex, {})

    def remove_vertex(self, vertex: Vertex) -> bool:
        if vertex not in self._adj:
            return False

        removed = len(self._adj.pop(vertex))
        for out in self._adj.values():
            if vertex in out:
                del out[vertex]
                # Undirected mirrors were already counted via the vertex's own map
                if self._directed:
                    removed += 1
        self._edge_count -= removed
        logger.debug("Removed vertex %r and %d incident edge(s)", vertex, removed)
        return True

    def add_edge(self, source: Vertex, target: Vertex, weight: Optional[float] = None) -> None:
        """
        Add or update the edge source -> target.
        Both endpoints must already exist.
        """
        out = self._outgoing(source)
        self._outgoing(target)
        w = check_weight(self._default_weight if weight is None else weight)

        if target not in out:
            self._edge_count += 1
        out[target] = w
        if not self._directed:
            self._adj[target][source] = w

    def remove_edge(self, source: Vertex, target: Vertex) -> bool:
        out = self._adj.get(source)
        if out is None or target not in out:
            return False
        del out[target]
        if not self._directed:
            self._adj[target].pop(source, None)
        self._edge_count -= 1
        return True

    # --- Graph interface -----------------------------------------------------

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return target in self._adj.get(source, {})

    def edge_weight(self, source: Vertex, target: Vertex) -> float:
        try:
            return self._adj[source][target]
        except KeyError:
            raise EdgeNotFoundError(source, target) from None

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        return list(self._outgoing(vertex))

    def edges(self, vertex: Vertex) -> List[Edge]:
        return [Edge(vertex, target, w) for target, w in self._outgoing(vertex).items()]

    def vertices(self) -> List[Vertex]:
        return list(self._adj)

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return self._edge_count

    def is_directed(self) -> bool:
        return self._directed

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"AdjacencyListGraph({kind}, V={len(self._adj)}, E={self._edge_count})"

    # --- Internal helpers ----------------------------------------------------

    def _outgoing(self, vertex: Vertex) -> Dict[Vertex, float]:
        try:
            return self._adj[vertex]
        except (KeyError, TypeError):
            raise UnknownVertexError(vertex) from None
