import pytest

from pathfinder import INFINITY, NOT_FOUND, Edge, Graph, VertexIndexError
from pathfinder.config import GraphConfig
from pathfinder.domain.errors import InvalidWeightError


def test_empty_graph_has_no_vertices():
    graph = Graph()

    assert graph.size() == 0
    assert len(graph) == 0
    assert graph.leaf_indexes() == []


def test_sized_graph_has_unlabeled_vertices():
    graph = Graph(3)

    assert graph.size() == 3
    assert [graph.vertex_value(i) for i in range(3)] == [None, None, None]


def test_graph_from_labels_keeps_order():
    graph = Graph(["A", "B", "C"])

    assert [graph.vertex_value(i) for i in range(3)] == ["A", "B", "C"]


def test_add_vertex_returns_stable_indices():
    graph = Graph(["A"])

    assert graph.add_vertex("B") == 1
    assert graph.add_vertex() == 2
    assert graph.add_vertices(["D", "E"]) == [3, 4]
    assert graph.vertex_value(1) == "B"
    assert graph.vertex_value(2) is None


def test_set_vertex_value_replaces_label():
    graph = Graph(["A", "B"])

    graph.set_vertex_value(1, "Z")

    assert graph.vertex_value(1) == "Z"
    assert graph.index_of("Z") == 1
    assert graph.index_of("B") == NOT_FOUND


def test_index_of_returns_first_match():
    graph = Graph(["A", "B", "A"])

    assert graph.index_of("A") == 0
    assert graph.index_of("missing") == NOT_FOUND


@pytest.mark.parametrize("index", [3, 10, -1])
def test_vertex_value_rejects_out_of_range(index):
    graph = Graph(["A", "B", "C"])

    with pytest.raises(VertexIndexError) as excinfo:
        graph.vertex_value(index)

    assert excinfo.value.index == index
    assert excinfo.value.size == 3


@pytest.mark.parametrize("index", [True, False, 1.0, "0"])
def test_vertex_value_rejects_non_int_index(index):
    graph = Graph(["A", "B"])

    with pytest.raises(VertexIndexError):
        graph.vertex_value(index)


def test_vertex_index_error_is_an_index_error():
    graph = Graph(1)

    with pytest.raises(IndexError):
        graph.set_vertex_value(1, "x")


def test_add_edge_rejects_unknown_destination():
    graph = Graph(2)

    with pytest.raises(VertexIndexError):
        graph.add_edge(0, 2)
    assert graph.neighbors(0) == []


def test_default_edge_weight_is_infinite():
    graph = Graph(2)

    graph.add_edge(0, 1, "link")

    assert graph.out_edges(0) == [Edge(label="link", weight=INFINITY, destination=1)]


def test_edge_queries(route_graph):
    assert route_graph.adjacent(0, 1)
    assert not route_graph.adjacent(1, 0)
    assert route_graph.edge_value(0, 2) == "ac"
    assert route_graph.edge_value(3, 0) is None
    assert route_graph.neighbors(0) == [1, 2]


def test_leaf_indexes(route_graph):
    assert route_graph.leaf_indexes() == [3]

    route_graph.add_vertex("E")

    assert route_graph.leaf_indexes() == [3, 4]


def test_parallel_edges_are_kept_and_removed_one_at_a_time():
    graph = Graph(["A", "B"])
    graph.add_edge(0, 1, "first", 1)
    graph.add_edge(0, 1, "second", 2)

    assert graph.neighbors(0) == [1, 1]
    assert graph.edge_value(0, 1) == "first"

    assert graph.remove_edge(0, 1) == "first"
    assert graph.adjacent(0, 1)
    assert graph.edge_value(0, 1) == "second"

    assert graph.remove_edge(0, 1) == "second"
    assert not graph.adjacent(0, 1)
    assert graph.edge_value(0, 1) is None
    assert graph.remove_edge(0, 1) is None


def test_remove_edge_keeps_other_edges_in_order():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)

    graph.remove_edge(0, 2)

    assert graph.neighbors(0) == [1, 3]


def test_negative_weights_accepted_by_default():
    graph = Graph(2, config=GraphConfig())

    graph.add_edge(0, 1, weight=-3)

    assert graph.out_edges(0)[0].weight == -3


def test_strict_weights_reject_negative_weight():
    graph = Graph(2, config=GraphConfig(strict_weights=True))

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.add_edge(0, 1, weight=-1)

    assert excinfo.value.weight == -1
    assert isinstance(excinfo.value, ValueError)
    assert not graph.adjacent(0, 1)


def test_strict_weights_allow_infinite_weight():
    graph = Graph(2, config=GraphConfig(strict_weights=True))

    graph.add_edge(0, 1)

    assert graph.adjacent(0, 1)


def test_repr_counts_vertices_and_edges(route_graph):
    assert repr(route_graph) == "Graph(vertices=4, edges=4)"
