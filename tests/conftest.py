"""Shared fixtures for the pathfinder test suite."""

from __future__ import annotations

import pytest

from pathfinder.config import GraphConfig, reset_config
from pathfinder.graph import Graph

_ENV_VARS = (
    "PATHFINDER_GRAPH_STRICT_WEIGHTS",
    "PATHFINDER_GRAPH_LOG_SEARCHES",
    "PATHFINDER_LOG_LEVEL",
    "PATHFINDER_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Run every test against default settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def route_graph() -> Graph[str, str]:
    """A->B (1), B->C (2), A->C (5), C->D (1)."""
    graph: Graph[str, str] = Graph(["A", "B", "C", "D"], config=GraphConfig())
    graph.add_edge(0, 1, "ab", 1)
    graph.add_edge(1, 2, "bc", 2)
    graph.add_edge(0, 2, "ac", 5)
    graph.add_edge(2, 3, "cd", 1)
    return graph


@pytest.fixture
def chain_graph() -> Graph[int, None]:
    """A long unit-weight chain 0 -> 1 -> ... -> 4999."""
    size = 5000
    graph: Graph[int, None] = Graph(range(size), config=GraphConfig())
    for index in range(size - 1):
        graph.add_edge(index, index + 1, weight=1)
    return graph
