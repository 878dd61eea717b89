"""Domain models for the pathfinder graph library.

Edges and route results are frozen dataclasses with slots. Vertices are
mutable: their label can be reassigned and their edge list grows and
shrinks, but they are only ever touched through the owning Graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from .weights import INFINITY

V = TypeVar("V")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Edge(Generic[E]):
    """A directed edge, owned by its source vertex.

    Attributes:
        label: Optional edge value, compared with ``==`` by path-following
        weight: Traversal cost; ``INFINITY`` marks a structural edge
        destination: Index of the vertex the edge points to
    """

    label: Optional[E]
    weight: int
    destination: int


@dataclass(slots=True)
class Vertex(Generic[V, E]):
    """A vertex with an optional label and its outgoing edges in insertion order."""

    label: Optional[V] = None
    edges: List[Edge[E]] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.edges


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path computation between two vertices.

    Attributes:
        path: Ordered tuple of vertex indices from departure to arrival
        total_weight: Sum of edge weights along the path
        labels: Vertex labels for each index in ``path``
    """

    path: tuple[int, ...]
    total_weight: int
    labels: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.path)

    @classmethod
    def empty(cls) -> RouteResult:
        return cls(path=(), total_weight=INFINITY)
