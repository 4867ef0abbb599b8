"""
Algorithm interfaces and result types for the graph engine.

Keeps graph algorithms separate from graph storage: everything here works
against the Graph interface and never mutates the graph it is given.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Any, Callable, Dict, Optional

from graph import Graph, Vertex

# Called once per visited vertex by the traversals.
Visitor = Callable[[Vertex], Any]


@dataclass(frozen=True)
class PathRecord:
    """
    Shortest-path result for one vertex.

    distance is math.inf for vertices the source cannot reach; predecessor
    is None for the source itself and for unreachable vertices.
    """
    distance: float = math.inf
    predecessor: Optional[Vertex] = None

    @property
    def reachable(self) -> bool:
        return self.distance != math.inf


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, float]:
        """
        Compute shortest-path costs from source to all reachable vertices.

        Returns:
            Mapping dest -> path_cost(source -> dest).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: Vertex) -> Dict[Vertex, PathRecord]:
        """
        Compute shortest-path costs plus the predecessor for every vertex.

        Returns:
            Mapping vertex -> PathRecord(distance, predecessor).
        """
        raise NotImplementedError
