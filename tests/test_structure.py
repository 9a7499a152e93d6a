"""Tests for adjacency, degree, directedness, cycles and components."""

import pytest

from citygraph.graph import (
    WeightedGraph,
    are_adjacent,
    component_size,
    has_cycle_through,
    highest_degree,
    is_directed,
    neighbors,
    shortest_path_length,
)


def test_directed_round_trip_scenario(abc_graph):
    assert are_adjacent(abc_graph, "A", "B")
    assert not are_adjacent(abc_graph, "B", "A")
    assert is_directed(abc_graph)
    assert shortest_path_length(abc_graph, "A", "C") == 1
    assert neighbors(abc_graph, "A") == ["B", "C"]
    assert component_size(abc_graph, "A") == 3


def test_undirected_scenario():
    graph = WeightedGraph(directed=False)
    graph.add_edge("A", "B", 5)

    assert are_adjacent(graph, "A", "B")
    assert are_adjacent(graph, "B", "A")
    assert not is_directed(graph)


# ---------- neighbors ----------


def test_neighbors_collapse_parallel_edges():
    graph = WeightedGraph()
    graph.add_edge("A", "C", 1)
    graph.add_edge("A", "B", 2)
    graph.add_edge("A", "C", 3)

    assert neighbors(graph, "A") == ["C", "B"]


def test_neighbors_empty(abc_graph):
    assert neighbors(abc_graph, "C") == []
    assert neighbors(abc_graph, "Z") == []


# ---------- degree ----------


def test_highest_degree_returns_all_ties():
    graph = WeightedGraph()
    for target in ("X", "Y", "Z"):
        graph.add_edge("A", target, 1)
    graph.add_edge("B", "A", 1)
    for target in ("X", "Y", "Z"):
        graph.add_edge("C", target, 1)

    assert highest_degree(graph) == ["A", "C"]


def test_highest_degree_counts_parallel_edges():
    graph = WeightedGraph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "A", 1)
    graph.add_edge("B", "A", 2)

    assert highest_degree(graph) == ["B"]


def test_highest_degree_edge_cases():
    empty = WeightedGraph()
    isolated = WeightedGraph()
    isolated.ensure_vertex("A")
    isolated.ensure_vertex("B")

    assert highest_degree(empty) == []
    assert highest_degree(isolated) == ["A", "B"]


# ---------- directedness ----------


def test_is_directed_ignores_construction_flag():
    symmetric = WeightedGraph(directed=True)
    symmetric.add_edge("A", "B", 4)
    symmetric.add_edge("B", "A", 4)

    assert symmetric.directed
    assert not is_directed(symmetric)


def test_is_directed_requires_matching_weights():
    graph = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 4)
    graph.add_edge("B", "A", 5)

    assert is_directed(graph)


def test_is_directed_edgeless_graph():
    graph = WeightedGraph()
    graph.ensure_vertex("A")

    assert not is_directed(graph)


# ---------- adjacency ----------


def test_are_adjacent_unknown_vertices(abc_graph):
    assert not are_adjacent(abc_graph, "A", "Z")
    assert not are_adjacent(abc_graph, "Z", "A")
    assert not are_adjacent(abc_graph, "A", "A")


# ---------- cycles ----------


@pytest.mark.parametrize("vertex", ["A", "B", "C"])
def test_every_vertex_on_a_cycle_reports_it(triangle, vertex):
    assert has_cycle_through(triangle, vertex)


def test_no_cycle_in_chain(abc_graph):
    for vertex in ("A", "B", "C", "Z"):
        assert not has_cycle_through(abc_graph, vertex)


def test_cycle_found_after_exploring_shared_descendant(diamond):
    # A->B->D is explored first and D is reached again through C; D must
    # have been released on backtrack for the cycle check to stay correct.
    assert has_cycle_through(diamond, "A")
    assert has_cycle_through(diamond, "D")


def test_cycle_through_vertex_shared_by_two_branches():
    # D is reachable through both B and C and is the only way back to A.
    graph = WeightedGraph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "D", 1)
    graph.add_edge("A", "C", 1)
    graph.add_edge("C", "D", 1)
    graph.add_edge("D", "E", 1)
    graph.add_edge("E", "A", 1)

    assert has_cycle_through(graph, "A")
    assert has_cycle_through(graph, "C")


def test_vertex_hanging_off_a_cycle_is_not_on_it(triangle):
    triangle.add_edge("A", "X", 1)

    assert not has_cycle_through(triangle, "X")
    assert has_cycle_through(triangle, "A")


def test_self_loop_is_a_cycle():
    graph = WeightedGraph()
    graph.add_edge("A", "A", 1)

    assert has_cycle_through(graph, "A")


def test_undirected_edge_closes_a_cycle():
    graph = WeightedGraph(directed=False)
    graph.add_edge("A", "B", 1)

    assert has_cycle_through(graph, "A")


# ---------- components ----------


def test_component_size_is_forward_reachability(abc_graph):
    assert component_size(abc_graph, "A") == 3
    assert component_size(abc_graph, "B") == 2
    assert component_size(abc_graph, "C") == 1


def test_component_size_unknown(abc_graph):
    assert component_size(abc_graph, "Z") == 0


def test_component_size_at_least_one(diamond):
    diamond.ensure_vertex("lonely")

    for vertex in diamond.names:
        assert component_size(diamond, vertex) >= 1
    assert component_size(diamond, "lonely") == 1
    assert component_size(diamond, "C") == 4


def test_component_size_undirected():
    graph = WeightedGraph(directed=False)
    graph.add_edge("A", "B", 1)
    graph.add_edge("C", "B", 1)
    graph.add_edge("D", "E", 1)

    assert component_size(graph, "C") == 3
    assert component_size(graph, "E") == 2
