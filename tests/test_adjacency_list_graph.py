"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from errors import EdgeNotFoundError, UnknownVertexError
from graph import Edge, Graph


def test_add_vertices_and_edges():
    g = AdjacencyListGraph(directed=True)
    for v in ("A", "B", "C"):
        g.add_vertex(v)

    g.add_edge("A", "B", 1.0)
    g.add_edge("A", "C", 2.0)
    g.add_edge("B", "C", 3.0)

    assert set(g.vertices()) == {"A", "B", "C"}
    assert g.neighbors("A") == ["B", "C"]
    assert g.neighbors("C") == []
    assert g.edges("B") == [Edge("B", "C", 3.0)]
    assert g.edge_count() == 3
    assert isinstance(g, Graph)


def test_edge_requires_known_vertices():
    g = AdjacencyListGraph()
    g.add_vertex("A")

    with pytest.raises(UnknownVertexError):
        g.add_edge("A", "missing")
    with pytest.raises(UnknownVertexError):
        g.add_edge("missing", "A")
    assert g.edge_count() == 0


def test_neighbors_returns_copy():
    g = AdjacencyListGraph()
    g.add_vertex("A")
    g.add_vertex("B")
    g.add_edge("A", "B", 1.0)

    out = g.neighbors("A")
    out.clear()

    # internal structure must remain intact
    assert g.neighbors("A") == ["B"]


def test_upsert_keeps_neighbor_position():
    g = AdjacencyListGraph()
    for v in ("A", "B", "C"):
        g.add_vertex(v)
    g.add_edge("A", "B", 1.0)
    g.add_edge("A", "C", 1.0)
    g.add_edge("A", "B", 9.0)

    assert g.neighbors("A") == ["B", "C"]
    assert g.edge_weight("A", "B") == 9.0


def test_undirected_self_loop_counts_once():
    g = AdjacencyListGraph(directed=False)
    g.add_vertex("A")
    g.add_edge("A", "A", 2.0)

    assert g.edge_count() == 1
    assert g.edges("A") == [Edge("A", "A", 2.0)]
    assert g.remove_vertex("A")
    assert g.edge_count() == 0


def test_missing_edge_weight_raises():
    g = AdjacencyListGraph()
    g.add_vertex("A")

    with pytest.raises(EdgeNotFoundError):
        g.edge_weight("A", "B")
    with pytest.raises(EdgeNotFoundError):
        g.edge_weight("nope", "A")


def test_unknown_vertex_queries():
    g = AdjacencyListGraph()

    with pytest.raises(UnknownVertexError):
        g.neighbors("X")
    with pytest.raises(UnknownVertexError):
        g.edges("X")
    assert not g.has_edge("X", "Y")
    assert not g.remove_edge("X", "Y")


def test_default_weight_is_configurable():
    g = AdjacencyListGraph(default_weight=2.5)
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)

    assert g.edge_weight(1, 2) == 2.5
