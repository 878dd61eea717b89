"""Graph ports - Abstractions for graph access and routing.

These protocols define the contracts the algorithms and the route
solver rely on, so they can run against any structure exposing the same
read-only surface as :class:`pathfinder.graph.Graph`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..config import GraphConfig
    from ..domain.models import Edge, RouteResult


class GraphView(Protocol):
    """Read-only view of a directed graph.

    Implementation: graph/core.py (Graph)

    Algorithms only read through this view; they never mutate it.
    """

    config: GraphConfig

    def size(self) -> int:
        """Return the number of vertices."""
        ...

    def check_index(self, index: int) -> int:
        """Validate a vertex index.

        Args:
            index: The vertex index to check.

        Returns:
            The same index, for chaining.

        Raises:
            VertexIndexError: If the index is negative or not below size().
        """
        ...

    def vertex_value(self, index: int) -> Optional[Any]:
        """Return the label of a vertex."""
        ...

    def out_edges(self, index: int) -> Sequence[Edge[Any]]:
        """Return the outgoing edges of a vertex in insertion order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py

    The solver computes cheapest paths between two vertices.
    """

    def solve(
        self,
        graph: GraphView,
        departure: int,
        arrival: int,
    ) -> RouteResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            departure: Index of the departure vertex.
            arrival: Index of the arrival vertex.

        Returns:
            RouteResult with path, total weight and vertex labels.
        """
        ...
