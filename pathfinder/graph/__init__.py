"""Graph storage and algorithms.

This subpackage contains the in-memory Graph and the path-finding,
traversal and ordering algorithms that run on top of it.
"""

from .core import Graph
from .dijkstra import DistanceEntry, DistanceTable

__all__ = ["Graph", "DistanceEntry", "DistanceTable"]
