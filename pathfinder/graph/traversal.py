"""Breadth-first and depth-first traversal.

Both families come in two flavours: a distance variant that labels every
reachable vertex, and a path variant that stops once the target is taken
off the frontier and rebuilds the route from a predecessor array.

Depth-first search is iterative so deep graphs cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from ..domain.weights import INFINITY, add_weights
from ..ports.graph import GraphView

logger = logging.getLogger(__name__)

_UNSET = -1


def _walk_back(predecessors: List[int], start: int, end: int) -> List[int]:
    path = [end]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path


def _log_traversal(graph: GraphView, kind: str, start: int, reached: int) -> None:
    if graph.config.log_searches:
        logger.debug(
            "Traversal finished",
            extra={"kind": kind, "origin": start, "reached": reached},
        )


def bfs_distances(graph: GraphView, start: int) -> List[int]:
    """Breadth-first distances from ``start`` following edge weights.

    Each vertex is marked when first enqueued and its distance is its BFS
    parent's distance plus the weight of the discovering edge. This is the
    shortest distance only when all weights are equal; otherwise it is the
    length along the BFS tree.

    Args:
        graph: Graph to traverse.
        start: Index of the origin vertex.

    Returns:
        Distance per vertex, ``INFINITY`` where unreached.
    """
    graph.check_index(start)
    size = graph.size()
    visited = [False] * size
    result = [INFINITY] * size
    visited[start] = True
    result[start] = 0
    queue: Deque[int] = deque([start])
    reached = 1

    while queue:
        current = queue.popleft()
        for edge in graph.out_edges(current):
            following = edge.destination
            if not visited[following]:
                visited[following] = True
                result[following] = add_weights(result[current], edge.weight)
                queue.append(following)
                reached += 1

    _log_traversal(graph, "bfs", start, reached)
    return result


def bfs_path(graph: GraphView, start: int, end: int) -> Optional[List[int]]:
    """Fewest-edge path from ``start`` to ``end``, ignoring weights.

    Args:
        graph: Graph to traverse.
        start: Index of the origin vertex.
        end: Index of the target vertex.

    Returns:
        Vertex indices from ``start`` to ``end`` inclusive, or ``None`` if
        ``end`` is unreachable. ``[start]`` when both are the same.
    """
    graph.check_index(start)
    graph.check_index(end)
    size = graph.size()
    visited = [False] * size
    predecessors = [_UNSET] * size
    visited[start] = True
    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        if current == end:
            break
        for edge in graph.out_edges(current):
            following = edge.destination
            if not visited[following]:
                visited[following] = True
                predecessors[following] = current
                queue.append(following)

    if not visited[end]:
        _log_traversal(graph, "bfs_path", start, 0)
        return None
    path = _walk_back(predecessors, start, end)
    _log_traversal(graph, "bfs_path", start, len(path))
    return path


def _depth_first(graph: GraphView, start: int, end: Optional[int] = None):
    """Shared stack-based walk for the DFS variants.

    Every neighbour of a processed vertex goes on the stack, so a vertex can
    be pending more than once; it is processed only on its first pop.
    Distance and predecessor are fixed when a vertex is first pushed.

    Returns ``(distances, predecessors, discovered)``.
    """
    graph.check_index(start)
    size = graph.size()
    discovered = [False] * size
    processed = [False] * size
    result = [INFINITY] * size
    predecessors = [_UNSET] * size
    discovered[start] = True
    result[start] = 0
    stack = [start]

    while stack:
        current = stack.pop()
        if current == end:
            break
        if processed[current]:
            continue
        processed[current] = True
        for edge in graph.out_edges(current):
            following = edge.destination
            if processed[following]:
                continue
            stack.append(following)
            if not discovered[following]:
                discovered[following] = True
                result[following] = result[current] + 1
                predecessors[following] = current

    return result, predecessors, discovered


def dfs_distances(graph: GraphView, start: int) -> List[int]:
    """Depth-first discovery depths from ``start``.

    A vertex's distance is one more than the vertex that first pushed it,
    so it reflects discovery order and is not a shortest distance.

    Returns:
        Distance per vertex, ``INFINITY`` where unreached.
    """
    result, _, discovered = _depth_first(graph, start)
    _log_traversal(graph, "dfs", start, sum(discovered))
    return result


def dfs_path(graph: GraphView, start: int, end: int) -> Optional[List[int]]:
    """Path from ``start`` to ``end`` along the depth-first discovery tree.

    Returns:
        Vertex indices from ``start`` to ``end`` inclusive, or ``None`` if
        ``end`` is unreachable.
    """
    graph.check_index(end)
    _, predecessors, discovered = _depth_first(graph, start, end)
    if not discovered[end]:
        _log_traversal(graph, "dfs_path", start, 0)
        return None
    path = _walk_back(predecessors, start, end)
    _log_traversal(graph, "dfs_path", start, len(path))
    return path
