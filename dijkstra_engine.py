"""
Heap-based DijkstraEngine implementation for the graph engine.

Uses BinaryHeap to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.

Edge weights must be non-negative. This is not checked; with a negative
weight the results are unspecified.
"""

from typing import Dict, List, Optional, Tuple
import math

from algorithms import DijkstraEngine, PathRecord
from binary_heap import BinaryHeap
from errors import UnknownVertexError
from graph import Graph, Vertex


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap without decrease-key.

    A vertex may sit in the heap several times under different keys; an
    entry whose key no longer matches the best known distance is stale and
    skipped when popped.

    Complexity:
        O((V + E) log V).
    """

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, float]:
        """
        Compute only the cost map for all reachable vertices from source.
        """
        dist, _ = self._run(graph, source)
        return dist

    def shortest_paths(self, graph: Graph, source: Vertex) -> Dict[Vertex, PathRecord]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every vertex of the graph appears in the result. Unreachable vertices
        carry an infinite distance and no predecessor, and so does the
        source's predecessor, since it has no parent. Walking predecessors
        from any reachable vertex ends at the source.
        """
        dist, prev = self._run(graph, source)
        return {
            v: PathRecord(dist.get(v, math.inf), prev.get(v))
            for v in graph.vertices()
        }

    def shortest_path(self, graph: Graph, source: Vertex, target: Vertex) -> List[Vertex]:
        """
        Vertices on a cheapest source -> target path, both ends included.

        Returns an empty list if target is unreachable. The search stops as
        soon as target is settled.
        """
        if not graph.has_vertex(target):
            raise UnknownVertexError(target)
        dist, prev = self._run(graph, source, target)
        if target not in dist:
            return []

        path = [target]
        while path[-1] != source:
            path.append(prev[path[-1]])
        path.reverse()
        return path

    # --- Internal helpers ---------------------------------------------------

    def _run(
        self, graph: Graph, source: Vertex, target: Optional[Vertex] = None
    ) -> Tuple[Dict[Vertex, float], Dict[Vertex, Vertex]]:
        if not graph.has_vertex(source):
            raise UnknownVertexError(source)

        dist: Dict[Vertex, float] = {source: 0.0}
        prev: Dict[Vertex, Vertex] = {}
        # Entries are (distance, vertex); only the distance is compared.
        pq: BinaryHeap[Tuple[float, Vertex]] = BinaryHeap.min_heap(key=lambda entry: entry[0])
        pq.insert((0.0, source))

        while pq:
            d_u, u = pq.extract_root()

            # Skip outdated entries
            if d_u != dist.get(u, math.inf):
                continue
            if u == target:
                break

            for edge in graph.edges(u):
                v = edge.target
                alt = d_u + edge.weight
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    pq.insert((alt, v))

        return dist, prev


_ENGINE = SimpleDijkstraEngine()


def dijkstra(graph: Graph, source: Vertex) -> Dict[Vertex, PathRecord]:
    """Shortest distance and predecessor for every vertex, from source."""
    return _ENGINE.shortest_paths(graph, source)


def shortest_path(graph: Graph, source: Vertex, target: Vertex) -> List[Vertex]:
    return _ENGINE.shortest_path(graph, source, target)
