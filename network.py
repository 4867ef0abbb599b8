"""
Service-topology helpers built on the graph engine.

NetworkTopology models servers joined by undirected latency links,
LatencyRouter answers lowest-latency questions over it, ServiceMonitor
traces which servers a failure can reach, and
DependencyResolver turns "service depends on service" declarations into a
start-up order.
"""

import logging
import math
from typing import Dict, List, Optional

from algorithms import PathRecord
from config import EngineConfig, make_graph
from dijkstra_engine import dijkstra, shortest_path
from errors import CycleDetectedError, UnknownVertexError
from graph import Graph
from topological_sort import topological_sort
from traversal import bfs

logger = logging.getLogger(__name__)


class NetworkTopology:
    """
    Undirected graph of servers weighted by link latency.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._graph: Graph = make_graph(directed=False, config=config)

    def add_server(self, server: str) -> None:
        self._graph.add_vertex(server)

    def connect(self, server1: str, server2: str, latency: Optional[float] = None) -> None:
        """Link two servers, adding either one if it is new."""
        self._graph.add_vertex(server1)
        self._graph.add_vertex(server2)
        self._graph.add_edge(server1, server2, latency)

    def disconnect(self, server1: str, server2: str) -> bool:
        return self._graph.remove_edge(server1, server2)

    def remove_server(self, server: str) -> bool:
        return self._graph.remove_vertex(server)

    @property
    def graph(self) -> Graph:
        return self._graph

    def servers(self) -> List[str]:
        return self._graph.vertices()

    def has_server(self, server: str) -> bool:
        return self._graph.has_vertex(server)

    def are_connected(self, server1: str, server2: str) -> bool:
        return self._graph.has_edge(server1, server2)


class LatencyRouter:
    """Lowest-latency routing over a NetworkTopology."""

    def __init__(self, topology: NetworkTopology) -> None:
        self._topology = topology

    def find_shortest_path(self, source: str, target: str) -> List[str]:
        """
        Servers on the fastest route, or [] if target is unreachable or not
        in the topology. An unknown source raises UnknownVertexError.
        """
        graph = self._topology.graph
        if not graph.has_vertex(source):
            raise UnknownVertexError(source)
        if not graph.has_vertex(target):
            return []
        path = shortest_path(graph, source, target)
        logger.info("Route %s -> %s: %s", source, target, " -> ".join(path) or "unreachable")
        return path

    def find_shortest_distance(self, source: str, target: str) -> float:
        """Latency of the fastest route; inf when target is unreachable or unknown."""
        records = dijkstra(self._topology.graph, source)
        record = records.get(target)
        return record.distance if record is not None else math.inf

    def find_all_distances(self, source: str) -> Dict[str, float]:
        return {v: r.distance for v, r in self.find_all_routes(source).items()}

    def find_all_routes(self, source: str) -> Dict[str, PathRecord]:
        return dijkstra(self._topology.graph, source)


class ServiceMonitor:
    """Failure impact analysis over a NetworkTopology."""

    def __init__(self, topology: NetworkTopology) -> None:
        self._topology = topology

    def find_cascading_failures(self, failed_server: str) -> List[str]:
        """
        Servers that can be reached from failed_server, in breadth-first
        order, excluding the failed server itself. Unknown servers affect
        nothing.
        """
        if not self._topology.has_server(failed_server):
            return []
        affected = [s for s in bfs(self._topology.graph, failed_server) if s != failed_server]
        logger.info("Failure of %s may affect %d server(s)", failed_server, len(affected))
        return affected


class DependencyResolver:
    """
    Start-up ordering for services with declared dependencies.

    An edge service -> dependency is stored for each declaration; the
    topological order of that graph lists dependents first, so it is
    reversed to start dependencies first.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self._graph: Graph = make_graph(directed=True, config=config)

    def add_service(self, service: str) -> None:
        self._graph.add_vertex(service)

    def add_dependency(self, service: str, depends_on: str) -> None:
        self._graph.add_vertex(service)
        self._graph.add_vertex(depends_on)
        self._graph.add_edge(service, depends_on)

    def remove_dependency(self, service: str, depends_on: str) -> bool:
        return self._graph.remove_edge(service, depends_on)

    def dependencies_of(self, service: str) -> List[str]:
        return self._graph.neighbors(service)

    def resolve_startup_order(self) -> List[str]:
        """
        Services ordered so each starts after everything it depends on.

        Raises CycleDetectedError if the declarations are circular.
        """
        try:
            order = topological_sort(self._graph)
        except CycleDetectedError as exc:
            logger.error("Cannot order services: %s", exc)
            raise
        order.reverse()
        logger.info("Resolved start-up order for %d service(s)", len(order))
        return order
