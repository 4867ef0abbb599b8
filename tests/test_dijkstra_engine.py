"""
Unit tests for SimpleDijkstraEngine and the dijkstra() entry point.
"""

import math

import pytest

from algorithms import PathRecord
from dijkstra_engine import SimpleDijkstraEngine, dijkstra, shortest_path
from errors import UnknownVertexError


def build(graph_factory, directed, edges):
    g = graph_factory(directed)
    for u, v, _ in edges:
        g.add_vertex(u)
        g.add_vertex(v)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def test_dijkstra_basic_paths(graph_factory):
    # A -> B (1), A -> C (4), B -> C (2), C -> D (1)
    g = build(graph_factory, True, [("A", "B", 1.0), ("A", "C", 4.0), ("B", "C", 2.0), ("C", "D", 1.0)])

    result = dijkstra(g, "A")

    assert result["A"] == PathRecord(0.0, None)
    assert result["B"] == PathRecord(1.0, "A")
    # Shortest A->C is A->B->C with cost 3.0
    assert result["C"] == PathRecord(3.0, "B")
    assert result["D"] == PathRecord(4.0, "C")


def test_predecessor_chain_walks_back_to_source(graph_factory):
    g = build(graph_factory, True, [("A", "B", 1.0), ("A", "C", 4.0), ("B", "C", 2.0), ("C", "D", 1.0)])
    result = dijkstra(g, "A")

    chain = ["D"]
    while result[chain[-1]].predecessor is not None:
        chain.append(result[chain[-1]].predecessor)

    assert chain == ["D", "C", "B", "A"]
    assert shortest_path(g, "A", "D") == ["A", "B", "C", "D"]


def test_unreachable_vertex_has_infinite_distance(graph_factory):
    g = build(graph_factory, True, [("A", "B", 2.0)])
    g.add_vertex("C")  # unreachable from A

    result = dijkstra(g, "A")

    assert result["B"].distance == 2.0
    assert result["C"].distance == math.inf
    assert result["C"].predecessor is None
    assert not result["C"].reachable
    assert shortest_path(g, "A", "C") == []


def test_engine_cost_map_omits_unreachable(graph_factory):
    g = build(graph_factory, True, [("A", "B", 2.0)])
    g.add_vertex("C")

    costs = SimpleDijkstraEngine().shortest_path_costs(g, "A")

    assert costs == {"A": 0.0, "B": 2.0}


def test_undirected_weighted_graph(graph_factory):
    g = build(
        graph_factory,
        False,
        [
            ("A", "B", 4.0),
            ("A", "C", 2.0),
            ("C", "B", 1.0),
            ("B", "D", 5.0),
            ("C", "D", 8.0),
            ("D", "E", 3.0),
        ],
    )

    result = dijkstra(g, "A")

    assert {v: r.distance for v, r in result.items()} == {
        "A": 0.0, "C": 2.0, "B": 3.0, "D": 8.0, "E": 11.0,
    }
    assert shortest_path(g, "A", "E") == ["A", "C", "B", "D", "E"]
    assert shortest_path(g, "E", "A") == ["E", "D", "B", "C", "A"]


def test_stale_heap_entries_are_skipped(graph_factory):
    # C is first queued at 10 via A, then improved to 3 via B.
    g = build(graph_factory, True, [("A", "C", 10.0), ("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 1.0)])

    result = dijkstra(g, "A")

    assert result["C"] == PathRecord(3.0, "B")
    assert result["D"] == PathRecord(4.0, "C")


def test_cycles_and_zero_weights(graph_factory):
    g = build(graph_factory, True, [("A", "B", 0.0), ("B", "A", 0.0), ("B", "C", 1.5), ("C", "A", 1.0)])

    result = dijkstra(g, "A")

    assert result["B"].distance == 0.0
    assert result["C"].distance == 1.5


def test_source_to_itself(graph_factory):
    g = build(graph_factory, True, [("A", "B", 1.0)])
    assert shortest_path(g, "A", "A") == ["A"]


def test_unknown_vertices_raise(graph_factory):
    g = build(graph_factory, True, [("A", "B", 1.0)])

    with pytest.raises(UnknownVertexError):
        dijkstra(g, "Z")
    with pytest.raises(UnknownVertexError):
        shortest_path(g, "A", "Z")


def test_graph_is_not_mutated(graph_factory):
    g = build(graph_factory, False, [("A", "B", 1.0), ("B", "C", 1.0)])
    dijkstra(g, "A")
    assert g.edge_count() == 2
    assert g.vertex_count() == 3
