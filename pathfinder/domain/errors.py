"""Typed errors for the pathfinder graph library.

Only two situations are fatal to a core graph call: addressing a vertex
index outside ``[0, size)`` and asking for a topological order of a graph
that contains a cycle. Every other "no result" outcome is reported with a
sentinel value (``NOT_FOUND``, ``None`` or ``INFINITY``).

All errors inherit from PathfinderError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class PathfinderError(Exception):
    """Base error for the pathfinder library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(eq=False)
class GraphError(PathfinderError):
    """Graph structure or integrity error."""


@dataclass(eq=False)
class VertexIndexError(GraphError, IndexError):
    """A vertex index fell outside ``[0, size)``.

    Also an ``IndexError`` so callers treating the graph like a sequence
    can catch it the usual way.

    Attributes:
        index: The offending index
        size: Number of vertices in the graph at the time of the call
    """

    index: int = -1
    size: int = 0


@dataclass(eq=False)
class NotADAGError(GraphError):
    """The graph contains a directed cycle, so it has no topological order.

    Attributes:
        vertex: Index of the vertex at which the cycle was closed
    """

    vertex: int = -1


@dataclass(eq=False)
class InvalidWeightError(GraphError, ValueError):
    """Edge weight rejected in strict-weights mode.

    Attributes:
        weight: The rejected weight
    """

    weight: int = 0


@dataclass(eq=False)
class NoRouteFoundError(PathfinderError):
    """No path exists between the requested vertices.

    Attributes:
        departure: Index of the departure vertex
        arrival: Index of the arrival vertex
    """

    departure: int = -1
    arrival: int = -1


@dataclass(eq=False)
class VertexNotFoundError(PathfinderError):
    """No vertex carries the requested label.

    Attributes:
        label: The label that was looked up
    """

    label: Any = None


@dataclass(eq=False)
class ConfigurationError(PathfinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
