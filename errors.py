"""
Exception types raised by the graph engine.

Usage errors subclass the builtin they most resemble so callers can catch
either the engine type or the familiar builtin.
"""

from typing import Any, Optional, Tuple


class GraphError(Exception):
    """Base class for graph engine failures."""


class UnknownVertexError(GraphError, KeyError):
    """A vertex referenced by an operation is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex not in graph: {vertex!r}")
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EdgeNotFoundError(GraphError, KeyError):
    """Requested edge does not exist."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"Edge does not exist: {source!r} -> {target!r}")
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return str(self.args[0])


class NotDirectedError(GraphError, ValueError):
    """Operation requires a directed graph."""


class CycleDetectedError(GraphError):
    """
    Raised when a dependency ordering is impossible because of a cycle.

    `edge` is the back-edge that closed the cycle, when known. It is a
    diagnostic only; the cycle itself is not reconstructed.
    """

    def __init__(self, message: str, edge: Optional[Tuple[Any, Any]] = None) -> None:
        super().__init__(message)
        self.edge = edge


class EmptyHeapError(IndexError):
    """Root access on an empty heap."""
