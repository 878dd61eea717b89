"""Ports layer - Abstract interfaces (Protocols) for the library.

Ports define the contracts between the graph algorithms and the code
that drives them, which keeps adapters swappable and testable.
"""

from .graph import GraphView, RouteSolverPort

__all__ = [
    "GraphView",
    "RouteSolverPort",
]
