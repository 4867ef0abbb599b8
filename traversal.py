"""
Depth-first and breadth-first traversal over any Graph.

Each traversal visits every vertex reachable from `start` exactly once,
calls `visitor` on it, and returns the visit order. Order among siblings
follows `graph.neighbors()` enumeration.
"""

from collections import deque
from typing import Deque, List, Optional, Set

from algorithms import Visitor
from errors import UnknownVertexError
from graph import Graph, Vertex


def dfs(graph: Graph, start: Vertex, visitor: Optional[Visitor] = None) -> List[Vertex]:
    """
    Iterative depth-first traversal with an explicit stack.

    Neighbours are pushed in reverse so they pop in enumeration order, which
    gives the same visit order as the recursive form.
    """
    _require(graph, start)
    order: List[Vertex] = []
    visited: Set[Vertex] = set()
    stack: List[Vertex] = [start]

    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        if visitor is not None:
            visitor(vertex)
        for neighbor in reversed(graph.neighbors(vertex)):
            if neighbor not in visited:
                stack.append(neighbor)

    return order


def dfs_recursive(graph: Graph, start: Vertex, visitor: Optional[Visitor] = None) -> List[Vertex]:
    """
    Recursive depth-first traversal.

    Recursion depth grows with the longest simple path explored, so prefer
    dfs() for long chains.
    """
    _require(graph, start)
    order: List[Vertex] = []
    visited: Set[Vertex] = set()

    def visit(vertex: Vertex) -> None:
        visited.add(vertex)
        order.append(vertex)
        if visitor is not None:
            visitor(vertex)
        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visit(neighbor)

    visit(start)
    return order


def bfs(graph: Graph, start: Vertex, visitor: Optional[Visitor] = None) -> List[Vertex]:
    """Breadth-first traversal; vertices are marked when enqueued."""
    _require(graph, start)
    order: List[Vertex] = []
    visited: Set[Vertex] = {start}
    queue: Deque[Vertex] = deque([start])

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        if visitor is not None:
            visitor(vertex)
        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order


def _require(graph: Graph, vertex: Vertex) -> None:
    if not graph.has_vertex(vertex):
        raise UnknownVertexError(vertex)
