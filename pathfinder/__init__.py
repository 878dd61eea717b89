"""Directed graphs with labeled vertices and edges.

The package exposes the Graph type and the algorithms built on it:
Dijkstra shortest paths (with closest-match and all-distances
variants), breadth-first and depth-first traversal, topological
ordering and path-following by edge label.
"""

from .adapters import DijkstraRouteSolver
from .config import AppConfig, GraphConfig, configure_logging, get_config, reset_config
from .domain import (
    INFINITY,
    NOT_FOUND,
    ConfigurationError,
    Edge,
    GraphError,
    InvalidWeightError,
    NoRouteFoundError,
    NotADAGError,
    PathfinderError,
    RouteResult,
    VertexIndexError,
    VertexNotFoundError,
)
from .graph import DistanceEntry, DistanceTable, Graph

__all__ = [
    "Graph",
    "DistanceEntry",
    "DistanceTable",
    "Edge",
    "RouteResult",
    "DijkstraRouteSolver",
    "INFINITY",
    "NOT_FOUND",
    "AppConfig",
    "GraphConfig",
    "get_config",
    "reset_config",
    "configure_logging",
    "PathfinderError",
    "GraphError",
    "VertexIndexError",
    "NotADAGError",
    "InvalidWeightError",
    "NoRouteFoundError",
    "VertexNotFoundError",
    "ConfigurationError",
]
