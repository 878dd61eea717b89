"""Dijkstra Route Solver adapter.

This adapter wraps the core Dijkstra search and adds:
- Typed errors for missing routes and unknown labels
- Label-based lookup of departure and arrival
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ...domain.errors import NoRouteFoundError, VertexIndexError, VertexNotFoundError
from ...domain.models import RouteResult
from ...domain.weights import NOT_FOUND
from ...graph import dijkstra as _dijkstra
from ...graph.core import Graph
from ...ports.graph import GraphView


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. Where the core algorithms
    report a missing path with the ``INFINITY`` sentinel, ``solve`` raises.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            VertexIndexError: If departure or arrival is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        route = _dijkstra.shortest_path(graph, departure, arrival)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": route.num_stops,
                "total_weight": route.total_weight,
            },
        )
        return route

    def solve_safe(
        self,
        graph: GraphView,
        departure: int,
        arrival: int,
    ) -> RouteResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult instead of raising
        for unknown indices or missing routes.
        """
        try:
            return _dijkstra.shortest_path(graph, departure, arrival)
        except VertexIndexError as e:
            self._logger.debug("Route lookup failed", extra={"error": str(e)})
            return RouteResult.empty()

    def solve_by_label(
        self,
        graph: Graph[Any, Any],
        departure: Any,
        arrival: Any,
    ) -> RouteResult:
        """Find the shortest path between the first vertices carrying two labels.

        Raises:
            VertexNotFoundError: If no vertex carries one of the labels.
            NoRouteFoundError: If no path exists.
        """
        return self.solve(
            graph,
            self._resolve(graph, departure),
            self._resolve(graph, arrival),
        )

    def _resolve(self, graph: Graph[Any, Any], label: Any) -> int:
        index = graph.index_of(label)
        if index == NOT_FOUND:
            raise VertexNotFoundError(f"No vertex labeled {label!r}", label=label)
        return index
