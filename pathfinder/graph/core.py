"""In-memory directed graph with labeled vertices and edges.

Vertices live in a list and are addressed by their position, which is
assigned on insertion and never changes. Each vertex keeps its outgoing
edges in a plain list: lookups are linear in the out-degree, and in
exchange edges keep their insertion order and parallel edges stay
distinct.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from ..config import GraphConfig, get_config
from ..domain.errors import InvalidWeightError, VertexIndexError
from ..domain.models import Edge, RouteResult, Vertex
from ..domain.weights import INFINITY, NOT_FOUND
from . import dijkstra as _dijkstra
from . import ordering as _ordering
from . import traversal as _traversal
from .dijkstra import DistanceEntry

V = TypeVar("V")
E = TypeVar("E")


class Graph(Generic[V, E]):
    """A directed graph with optional vertex and edge labels.

    Args:
        vertices: ``None`` for an empty graph, an ``int`` for that many
            unlabeled vertices, or an iterable of vertex labels.
        config: Graph configuration. Defaults to ``get_config().graph``.

    Example:
        graph = Graph(["A", "B", "C"])
        graph.add_edge(0, 1, weight=1)
        graph.add_edge(1, 2, weight=2)
        graph.dijkstra(0, 2).distance  # 3
    """

    def __init__(
        self,
        vertices: Union[int, Iterable[V], None] = None,
        *,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.config = config or get_config().graph
        self._vertices: List[Vertex[V, E]] = []
        if isinstance(vertices, int):
            for _ in range(vertices):
                self.add_vertex()
        elif vertices is not None:
            self.add_vertices(vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        edges = sum(len(vertex.edges) for vertex in self._vertices)
        return f"Graph(vertices={len(self._vertices)}, edges={edges})"

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def check_index(self, index: int) -> int:
        """Validate a vertex index and return it.

        ``bool`` values are rejected even though they are ints.

        Raises:
            VertexIndexError: If ``index`` is not an int, is negative or is
                not below size().
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise VertexIndexError(
                f"Vertex index must be an int, got {index!r}",
                index=index,
                size=len(self._vertices),
            )
        if not 0 <= index < len(self._vertices):
            raise VertexIndexError(
                f"Vertex index {index} out of range for graph of size "
                f"{len(self._vertices)}",
                index=index,
                size=len(self._vertices),
            )
        return index

    def _vertex(self, index: int) -> Vertex[V, E]:
        return self._vertices[self.check_index(index)]

    def add_vertex(self, label: Optional[V] = None) -> int:
        """Append a vertex and return its index."""
        self._vertices.append(Vertex(label=label))
        return len(self._vertices) - 1

    def add_vertices(self, labels: Iterable[V]) -> List[int]:
        """Append one vertex per label and return the new indices."""
        return [self.add_vertex(label) for label in labels]

    def vertex_value(self, index: int) -> Optional[V]:
        """Return the label of the vertex at ``index``."""
        return self._vertex(index).label

    def set_vertex_value(self, index: int, label: Optional[V]) -> None:
        """Replace the label of the vertex at ``index``."""
        self._vertex(index).label = label

    def index_of(self, label: V) -> int:
        """Return the index of the first vertex labeled ``label``, or ``NOT_FOUND``."""
        for index, vertex in enumerate(self._vertices):
            if vertex.label == label:
                return index
        return NOT_FOUND

    def leaf_indexes(self) -> List[int]:
        """Return the indices of all vertices without outgoing edges."""
        return [index for index, vertex in enumerate(self._vertices) if vertex.is_leaf]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        start: int,
        end: int,
        label: Optional[E] = None,
        weight: int = INFINITY,
    ) -> None:
        """Add a directed edge from ``start`` to ``end``.

        Leaving ``weight`` at ``INFINITY`` makes a purely structural edge,
        which weighted searches never relax.

        Raises:
            VertexIndexError: If either index is out of range.
            InvalidWeightError: In strict-weights mode, if ``weight`` is
                negative or above ``INFINITY``.
        """
        source = self._vertex(start)
        self.check_index(end)
        if self.config.strict_weights and not 0 <= weight <= INFINITY:
            raise InvalidWeightError(
                f"Edge weight must be between 0 and INFINITY, got {weight}",
                weight=weight,
            )
        source.edges.append(Edge(label=label, weight=weight, destination=end))

    def _find_edge(self, start: int, end: int) -> Optional[int]:
        self.check_index(end)
        for position, edge in enumerate(self._vertex(start).edges):
            if edge.destination == end:
                return position
        return None

    def edge_value(self, start: int, end: int) -> Optional[E]:
        """Return the label of the first edge from ``start`` to ``end``.

        ``None`` if there is no such edge (or if its label is ``None``).
        """
        position = self._find_edge(start, end)
        if position is None:
            return None
        return self._vertices[start].edges[position].label

    def adjacent(self, start: int, end: int) -> bool:
        """Check whether an edge goes from ``start`` to ``end``."""
        return self._find_edge(start, end) is not None

    def remove_edge(self, start: int, end: int) -> Optional[E]:
        """Remove the first edge from ``start`` to ``end``.

        Returns:
            The removed edge's label, or ``None`` if there was no edge.
        """
        position = self._find_edge(start, end)
        if position is None:
            return None
        return self._vertices[start].edges.pop(position).label

    def neighbors(self, start: int) -> List[int]:
        """Return the destination of every outgoing edge of ``start``.

        Parallel edges appear once per edge, in insertion order.
        """
        return [edge.destination for edge in self._vertex(start).edges]

    def out_edges(self, index: int) -> Sequence[Edge[E]]:
        """Return the outgoing edges of a vertex in insertion order.

        The returned sequence is the graph's own storage; treat it as
        read-only.
        """
        return self._vertex(index).edges

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def dijkstra(self, start: int, end: int) -> DistanceEntry:
        """Shortest distance from ``start`` to ``end`` (see graph.dijkstra)."""
        return _dijkstra.dijkstra(self, start, end)

    def shortest_path(self, start: int, end: int) -> RouteResult:
        """Shortest path from ``start`` to ``end`` as a RouteResult."""
        return _dijkstra.shortest_path(self, start, end)

    def closest(self, start: int, target: Any) -> int:
        """Nearest vertex labeled ``target``, or ``NOT_FOUND``."""
        return _dijkstra.closest(self, start, target)

    def distances(self, start: int) -> List[int]:
        """Shortest distance from ``start`` to every vertex."""
        return _dijkstra.distances(self, start)

    def furthest_point(self, start: int) -> int:
        """Reachable vertex furthest from ``start``, or ``NOT_FOUND``."""
        return _dijkstra.furthest_point(self, start)

    def bfs_distances(self, start: int) -> List[int]:
        return _traversal.bfs_distances(self, start)

    def bfs_path(self, start: int, end: int) -> Optional[List[int]]:
        return _traversal.bfs_path(self, start, end)

    def dfs_distances(self, start: int) -> List[int]:
        return _traversal.dfs_distances(self, start)

    def dfs_path(self, start: int, end: int) -> Optional[List[int]]:
        return _traversal.dfs_path(self, start, end)

    def topological_sort(self) -> List[int]:
        """Vertex indices in topological order; raises NotADAGError on cycles."""
        return _ordering.topological_sort(self)

    def follow_path(self, start: int, labels: Iterable[E]) -> int:
        """Vertex reached by following edge labels, or ``NOT_FOUND``."""
        return _ordering.follow_path(self, start, labels)
