"""Shortest-path computation using Dijkstra's algorithm.

Every search allocates one :class:`DistanceEntry` per vertex in a
:class:`DistanceTable`. Predecessors are stored as indices into that
table. Each entry also keeps a reference to its table, so the entry
returned by :func:`dijkstra` can still rebuild its path with
:meth:`DistanceEntry.path` after the call returns.

The priority queue is a ``heapq`` list of ``(distance, sequence, index)``
tuples. An entry is pushed again each time its distance improves and the
superseded tuples stay in the heap; they are skipped when popped. The
sequence number breaks distance ties in push order, which keeps results
deterministic. Entries compare by distance only for callers that sort
them; the search itself never orders entries.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from ..domain.models import RouteResult
from ..domain.weights import INFINITY, NOT_FOUND, add_weights
from ..ports.graph import GraphView

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DistanceEntry:
    """Per-vertex search record.

    Attributes
    ----------
    index:
        Vertex this entry tracks.
    origin:
        Vertex the search started from.
    distance:
        Best distance found so far, ``INFINITY`` until the vertex is reached.
    predecessor:
        Index of the entry that achieved ``distance``; ``None`` for the
        origin and for unreached vertices.
    table:
        The search table the predecessor index points into.
    """

    index: int
    origin: int
    distance: int = INFINITY
    predecessor: Optional[int] = None
    table: Optional[DistanceTable] = field(default=None, repr=False, compare=False)

    def __lt__(self, other: DistanceEntry) -> bool:
        return self.distance < other.distance

    @property
    def reachable(self) -> bool:
        return self.distance != INFINITY

    def path(self) -> Optional[List[int]]:
        """Vertex indices from the origin to this entry, or ``None`` if unreached."""
        if self.table is None:
            return None
        return self.table.path_to(self.index)


@dataclass(slots=True)
class DistanceTable:
    """Arena of distance entries for a single search."""

    origin: int
    entries: List[DistanceEntry]

    @classmethod
    def fill(cls, size: int, origin: int) -> DistanceTable:
        entries = [DistanceEntry(index=i, origin=origin) for i in range(size)]
        entries[origin].distance = 0
        table = cls(origin=origin, entries=entries)
        for entry in entries:
            entry.table = table
        return table

    def __getitem__(self, index: int) -> DistanceEntry:
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)

    def distances(self) -> List[int]:
        return [entry.distance for entry in self.entries]

    def path_to(self, index: int) -> Optional[List[int]]:
        """Walk the predecessor chain back from ``index`` to the origin.

        Returns ``None`` when ``index`` was never reached. The path is only
        guaranteed shortest for vertices the search settled.
        """
        if not self.entries[index].reachable:
            return None
        path = [index]
        predecessor = self.entries[index].predecessor
        while predecessor is not None:
            path.append(predecessor)
            predecessor = self.entries[predecessor].predecessor
        path.reverse()
        return path


def _search(
    graph: GraphView,
    start: int,
    stop: Callable[[DistanceEntry], bool],
) -> Tuple[DistanceTable, Optional[int]]:
    """Run Dijkstra from ``start`` until ``stop`` accepts a settled entry.

    Returns the table and the index accepted by ``stop``, or ``None`` if the
    queue ran dry first.
    """
    graph.check_index(start)
    table = DistanceTable.fill(graph.size(), start)
    settled = [False] * len(table)
    sequence = itertools.count(1)
    heap: List[Tuple[int, int, int]] = [(0, 0, start)]
    pops = 0

    while heap:
        distance, _, index = heapq.heappop(heap)
        entry = table[index]
        if settled[index] or distance > entry.distance:
            continue
        settled[index] = True
        pops += 1

        if stop(entry):
            _log_search(graph, start, pops, found=index)
            return table, index
        if distance == INFINITY:
            break

        for edge in graph.out_edges(index):
            candidate = add_weights(distance, edge.weight)
            neighbour = table[edge.destination]
            if candidate < neighbour.distance:
                neighbour.distance = candidate
                neighbour.predecessor = index
                heapq.heappush(heap, (candidate, next(sequence), edge.destination))

    _log_search(graph, start, pops, found=None)
    return table, None


def _log_search(graph: GraphView, start: int, pops: int, found: Optional[int]) -> None:
    if graph.config.log_searches:
        logger.debug(
            "Dijkstra search finished",
            extra={"origin": start, "settled": pops, "found": found},
        )


def dijkstra(graph: GraphView, start: int, end: int) -> DistanceEntry:
    """Compute the shortest distance between two vertices.

    Parameters
    ----------
    graph:
        Graph to search. Weights must be non-negative.
    start:
        Index of the departure vertex.
    end:
        Index of the arrival vertex.

    Returns
    -------
    DistanceEntry
        The entry for ``end``. Its distance is ``INFINITY`` if there is no
        path; otherwise ``entry.path()`` gives the route from ``start``.

    Raises
    ------
    VertexIndexError
        If either index is out of range.
    """
    graph.check_index(end)
    table, _ = _search(graph, start, lambda entry: entry.index == end)
    return table[end]


def shortest_path(graph: GraphView, start: int, end: int) -> RouteResult:
    """Compute the shortest path between two vertices.

    Returns
    -------
    RouteResult
        Vertex indices from ``start`` to ``end`` (inclusive), the total
        weight and the vertex labels along the way. If no path exists the
        result is empty with a total weight of ``INFINITY``.
    """
    graph.check_index(end)
    table, _ = _search(graph, start, lambda entry: entry.index == end)
    path = table.path_to(end)
    if path is None:
        return RouteResult.empty()
    return RouteResult(
        path=tuple(path),
        total_weight=table[end].distance,
        labels=tuple(graph.vertex_value(index) for index in path),
    )


def closest(graph: GraphView, start: int, target: Any) -> int:
    """Find the nearest vertex whose label equals ``target``.

    Returns
    -------
    int
        Index of the first vertex settled with a matching label, or
        ``NOT_FOUND``. The origin itself matches at distance zero.
    """
    _, found = _search(
        graph, start, lambda entry: graph.vertex_value(entry.index) == target
    )
    return NOT_FOUND if found is None else found


def distances(graph: GraphView, start: int) -> List[int]:
    """Return the shortest distance from ``start`` to every vertex.

    Unreachable vertices get ``INFINITY``.
    """
    table, _ = _search(graph, start, lambda entry: False)
    return table.distances()


def furthest_point(graph: GraphView, start: int) -> int:
    """Return the reachable vertex furthest from ``start``.

    Unreachable vertices are ignored. Ties go to the lowest index, and
    ``NOT_FOUND`` is returned when nothing lies at a positive distance.
    """
    furthest = NOT_FOUND
    longest = 0
    for index, distance in enumerate(distances(graph, start)):
        if distance != INFINITY and distance > longest:
            longest = distance
            furthest = index
    return furthest
