"""Domain layer - models, sentinels and typed errors.

Nothing in this package depends on the graph algorithms or on
configuration; everything else builds on it.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidWeightError,
    NoRouteFoundError,
    NotADAGError,
    PathfinderError,
    VertexIndexError,
    VertexNotFoundError,
)
from .models import Edge, RouteResult, Vertex
from .weights import INFINITY, NOT_FOUND, add_weights, is_finite

__all__ = [
    # Models
    "Edge",
    "Vertex",
    "RouteResult",
    # Weights
    "INFINITY",
    "NOT_FOUND",
    "add_weights",
    "is_finite",
    # Errors
    "PathfinderError",
    "GraphError",
    "VertexIndexError",
    "NotADAGError",
    "InvalidWeightError",
    "NoRouteFoundError",
    "VertexNotFoundError",
    "ConfigurationError",
]
