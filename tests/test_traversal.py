"""Tests for breadth-first and depth-first traversal."""

import pytest

from pathfinder import INFINITY, Graph, VertexIndexError
from pathfinder.config import GraphConfig


@pytest.fixture
def unit_graph():
    """Unit-weight graph with a shortcut 0 -> 3 and a dead end at 5."""
    graph = Graph(6, config=GraphConfig())
    for start, end in [(0, 1), (1, 2), (2, 3), (0, 3), (3, 4), (2, 4), (5, 0)]:
        graph.add_edge(start, end, weight=1)
    return graph


class TestBreadthFirst:
    def test_distances_follow_bfs_tree_weights(self, route_graph):
        # C is discovered through A->C (5), not A->B->C (3).
        assert route_graph.bfs_distances(0) == [0, 1, 5, 6]

    def test_origin_distance_is_zero(self, route_graph):
        for origin in range(route_graph.size()):
            assert route_graph.bfs_distances(origin)[origin] == 0

    def test_unreached_vertices_are_infinite(self, unit_graph):
        assert unit_graph.bfs_distances(0)[5] == INFINITY

    def test_structural_edges_give_infinite_distance(self):
        graph = Graph(2, config=GraphConfig())
        graph.add_edge(0, 1)

        assert graph.bfs_distances(0) == [0, INFINITY]

    def test_path_uses_fewest_edges(self, route_graph):
        assert route_graph.bfs_path(0, 3) == [0, 2, 3]

    def test_path_to_self(self, route_graph):
        assert route_graph.bfs_path(2, 2) == [2]

    def test_path_to_unreachable_is_none(self, route_graph):
        isolated = route_graph.add_vertex("E")

        assert route_graph.bfs_path(0, isolated) is None
        assert route_graph.bfs_distances(0)[isolated] == INFINITY

    def test_path_length_matches_unit_distance(self, unit_graph):
        for origin in range(unit_graph.size()):
            distances = unit_graph.bfs_distances(origin)
            for target in range(unit_graph.size()):
                path = unit_graph.bfs_path(origin, target)
                if distances[target] == INFINITY:
                    assert path is None
                else:
                    assert path[0] == origin
                    assert path[-1] == target
                    assert len(path) - 1 == distances[target]

    def test_path_follows_existing_edges(self, unit_graph):
        path = unit_graph.bfs_path(5, 4)

        assert path == [5, 0, 3, 4]
        for start, end in zip(path, path[1:]):
            assert unit_graph.adjacent(start, end)

    def test_rejects_bad_indices(self, unit_graph):
        with pytest.raises(VertexIndexError):
            unit_graph.bfs_path(0, 6)
        with pytest.raises(VertexIndexError):
            unit_graph.bfs_distances(-1)


class TestDepthFirst:
    def test_distances_record_discovery_depth(self, route_graph):
        # Both neighbours of A are discovered from A; D is found from C.
        assert route_graph.dfs_distances(0) == [0, 1, 1, 2]

    def test_first_discovery_wins(self):
        graph = Graph(3, config=GraphConfig())
        graph.add_edge(0, 1)
        graph.add_edge(0, 2)
        graph.add_edge(2, 1)

        assert graph.dfs_distances(0) == [0, 1, 1]
        assert graph.dfs_path(0, 1) == [0, 1]

    def test_path_follows_last_pushed_branch(self, route_graph):
        assert route_graph.dfs_path(0, 3) == [0, 2, 3]

    def test_cycle_back_to_origin_keeps_zero(self):
        graph = Graph(2, config=GraphConfig())
        graph.add_edge(0, 1)
        graph.add_edge(1, 0)

        assert graph.dfs_distances(0) == [0, 1]
        assert graph.dfs_path(0, 0) == [0]

    def test_unreached_target_is_none_not_zero(self):
        graph = Graph(2, config=GraphConfig())

        assert graph.dfs_path(0, 1) is None
        assert graph.dfs_path(0, 0) == [0]
        assert graph.dfs_distances(0) == [0, INFINITY]

    def test_deep_graph_does_not_recurse(self, chain_graph):
        last = chain_graph.size() - 1

        path = chain_graph.dfs_path(0, last)

        assert path == list(range(chain_graph.size()))
        assert chain_graph.dfs_distances(0)[last] == last
