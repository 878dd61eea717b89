"""Adapters layer - Concrete implementations of the ports."""

from .graph import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver"]
