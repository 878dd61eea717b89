"""Topological ordering and label-driven path following."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Tuple

from ..domain.errors import NotADAGError
from ..domain.weights import NOT_FOUND
from ..ports.graph import GraphView

logger = logging.getLogger(__name__)


def topological_sort(graph: GraphView) -> List[int]:
    """Order the vertices so every edge points forward.

    Depth-first visit with temporary (on the current path) and permanent
    (finished) marks. Roots are tried in index order and the result is the
    reverse of the order in which vertices finish. The explicit stack holds
    ``(vertex, next edge position)`` pairs and finishes vertices in the
    same order as the recursive formulation.

    Args:
        graph: Graph to order.

    Returns:
        All vertex indices in topological order.

    Raises:
        NotADAGError: If the graph contains a directed cycle. No partial
            order is returned.
    """
    size = graph.size()
    permanent = [False] * size
    temporary = [False] * size
    finished: List[int] = []

    for root in range(size):
        if permanent[root]:
            continue
        temporary[root] = True
        stack: List[Tuple[int, int]] = [(root, 0)]

        while stack:
            vertex, position = stack[-1]
            edges = graph.out_edges(vertex)
            if position < len(edges):
                stack[-1] = (vertex, position + 1)
                child = edges[position].destination
                if permanent[child]:
                    continue
                if temporary[child]:
                    logger.warning("Cycle detected", extra={"vertex": child})
                    raise NotADAGError("Graph is not a DAG", vertex=child)
                temporary[child] = True
                stack.append((child, 0))
            else:
                stack.pop()
                permanent[vertex] = True
                finished.append(vertex)

    finished.reverse()
    return finished


def follow_path(graph: GraphView, start: int, labels: Iterable[Any]) -> int:
    """Follow edges by label from ``start``.

    At each step the first outgoing edge, in insertion order, whose label
    equals the next label is taken.

    Args:
        graph: Graph to walk.
        start: Index of the vertex to start from.
        labels: Edge labels to follow, in order.

    Returns:
        Index of the vertex reached, or ``NOT_FOUND`` as soon as a step has
        no matching edge.
    """
    current = graph.check_index(start)
    for label in labels:
        for edge in graph.out_edges(current):
            if edge.label == label:
                current = edge.destination
                break
        else:
            return NOT_FOUND
    return current
