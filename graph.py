"""
Weighted graph abstraction for the engine.

Vertices are any hashable caller-supplied identifiers.
Edges carry a float weight; directedness is fixed when a graph is built.
Storage layouts (adjacency list, adjacency matrix) satisfy this interface
structurally and share no implementation.
"""

import math
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Protocol, runtime_checkable

Vertex = Hashable


@dataclass(frozen=True)
class Edge:
    """
    One directed edge entry: source ---weight---> target.
    """

    source: Any
    target: Any
    weight: float = 1.0


def check_vertex(vertex: Vertex) -> None:
    """Reject identifiers that cannot act as a vertex."""
    if vertex is None:
        raise ValueError("Vertex cannot be None")


@runtime_checkable
class Graph(Protocol):
    """Mutable weighted graph, directed or undirected."""

    # --- Mutation ----------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex; adding one that already exists is a no-op."""
        ...

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex and every edge touching it. Returns whether it was present."""
        ...

    def add_edge(self, source: Vertex, target: Vertex, weight: Optional[float] = None) -> None:
        """
        Insert or update the edge source -> target.

        A missing weight means the graph's default weight (1.0 unless configured).

        Raises UnknownVertexError if either endpoint is missing. On an
        undirected graph the mirror entry is written in the same call.
        """
        ...

    def remove_edge(self, source: Vertex, target: Vertex) -> bool:
        """Remove the edge (and its mirror if undirected). Returns whether it was present."""
        ...

    # --- Queries -----------------------------------------------------------

    def has_vertex(self, vertex: Vertex) -> bool:
        ...

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        ...

    def edge_weight(self, source: Vertex, target: Vertex) -> float:
        """Weight of source -> target. Raises EdgeNotFoundError if absent."""
        ...

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Targets of the vertex's outgoing edges. Raises UnknownVertexError."""
        ...

    def edges(self, vertex: Vertex) -> List[Edge]:
        """Outgoing edges of the vertex. Raises UnknownVertexError."""
        ...

    def vertices(self) -> List[Vertex]:
        ...

    def vertex_count(self) -> int:
        ...

    def edge_count(self) -> int:
        """Logical edges: an undirected pair counts once."""
        ...

    def is_directed(self) -> bool:
        ...


def check_weight(weight: float) -> float:
    """Coerce an edge weight to float, rejecting inf and NaN."""
    w = float(weight)
    if not math.isfinite(w):
        raise ValueError(f"Edge weight must be finite, got {weight!r}")
    return w
