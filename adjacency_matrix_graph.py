"""
Weighted graph implementation for the engine backed by an adjacency matrix.

Weights live in a square numpy array indexed through a vertex -> index map;
`inf` marks a missing edge. Edge lookups are O(1) and space is O(V^2)
regardless of edge count, which suits dense graphs.

        A    B    C
    A [ inf  5.0  inf ]
    B [ inf  inf  3.0 ]
    C [ inf  inf  inf ]
"""

import logging
import math
from typing import Dict, List, Optional

import numpy as np

from config import DEFAULT_EDGE_WEIGHT, DEFAULT_MATRIX_CAPACITY
from errors import EdgeNotFoundError, UnknownVertexError
from graph import Edge, Vertex, check_vertex, check_weight

logger = logging.getLogger(__name__)


class AdjacencyMatrixGraph:
    """
    Directed or undirected weighted graph over a growable weight table.

    Live vertices always occupy indices 0..V-1; removing a vertex moves the
    last vertex into the freed slot. Neighbours enumerate in index order.
    """

    def __init__(
        self,
        directed: bool = True,
        capacity: int = DEFAULT_MATRIX_CAPACITY,
        default_weight: float = DEFAULT_EDGE_WEIGHT,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._directed = bool(directed)
        self._default_weight = float(default_weight)
        self._matrix = np.full((capacity, capacity), np.inf, dtype=float)
        self._index: Dict[Vertex, int] = {}
        self._vertices: List[Vertex] = []
        self._edge_count = 0

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        check_vertex(vertex)
        if vertex in self._index:
            return
        idx = len(self._vertices)
        if idx >= self._matrix.shape[0]:
            self._grow()
        self._index[vertex] = idx
        self._vertices.append(vertex)

    def remove_vertex(self, vertex: Vertex) -> bool:
        idx = self._index.get(vertex)
        if idx is None:
            return False

        n = len(self._vertices)
        m = self._matrix
        row = np.isfinite(m[idx, :n])
        removed = int(row.sum())
        if self._directed:
            col = np.isfinite(m[:n, idx])
            # self-loop already counted in the row
            removed += int(col.sum()) - int(col[idx])
        self._edge_count -= removed

        last = n - 1
        if idx != last:
            moved = self._vertices[last]
            m[[idx, last], :] = m[[last, idx], :]
            m[:, [idx, last]] = m[:, [last, idx]]
            self._index[moved] = idx
            self._vertices[idx] = moved
        m[last, :] = np.inf
        m[:, last] = np.inf
        self._vertices.pop()
        del self._index[vertex]
        logger.debug("Removed vertex %r and %d incident edge(s)", vertex, removed)
        return True

    def add_edge(self, source: Vertex, target: Vertex, weight: Optional[float] = None) -> None:
        s = self._require(source)
        t = self._require(target)
        w = check_weight(self._default_weight if weight is None else weight)

        if not math.isfinite(self._matrix[s, t]):
            self._edge_count += 1
        self._matrix[s, t] = w
        if not self._directed:
            self._matrix[t, s] = w

    def remove_edge(self, source: Vertex, target: Vertex) -> bool:
        s = self._index.get(source)
        t = self._index.get(target)
        if s is None or t is None or not math.isfinite(self._matrix[s, t]):
            return False
        self._matrix[s, t] = np.inf
        if not self._directed:
            self._matrix[t, s] = np.inf
        self._edge_count -= 1
        return True

    # --- Graph interface -----------------------------------------------------

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._index

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        s = self._index.get(source)
        t = self._index.get(target)
        if s is None or t is None:
            return False
        return math.isfinite(self._matrix[s, t])

    def edge_weight(self, source: Vertex, target: Vertex) -> float:
        if not self.has_edge(source, target):
            raise EdgeNotFoundError(source, target)
        return float(self._matrix[self._index[source], self._index[target]])

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        idx = self._require(vertex)
        row = self._matrix[idx, : len(self._vertices)]
        return [self._vertices[i] for i in np.flatnonzero(np.isfinite(row))]

    def edges(self, vertex: Vertex) -> List[Edge]:
        idx = self._require(vertex)
        row = self._matrix[idx, : len(self._vertices)]
        return [
            Edge(vertex, self._vertices[i], float(row[i]))
            for i in np.flatnonzero(np.isfinite(row))
        ]

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return self._edge_count

    def is_directed(self) -> bool:
        return self._directed

    @property
    def capacity(self) -> int:
        """Current dimension of the weight table."""
        return self._matrix.shape[0]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"AdjacencyMatrixGraph({kind}, V={len(self._vertices)}, "
            f"E={self._edge_count}, capacity={self.capacity})"
        )

    # --- Internal helpers ----------------------------------------------------

    def _require(self, vertex: Vertex) -> int:
        try:
            return self._index[vertex]
        except (KeyError, TypeError):
            raise UnknownVertexError(vertex) from None

    def _grow(self) -> None:
        old = self._matrix
        size = old.shape[0]
        grown = np.full((size * 2, size * 2), np.inf, dtype=float)
        grown[:size, :size] = old
        self._matrix = grown
        # Re-register so the map and the enlarged table agree.
        self._index = {v: i for i, v in enumerate(self._vertices)}
        logger.debug("Grew adjacency matrix from %d to %d", size, size * 2)
