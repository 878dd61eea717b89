"""Edge weights and the sentinels shared by every graph algorithm.

``INFINITY`` is the largest signed 64-bit value. No sum of real edge
weights is allowed to reach it: :func:`add_weights` saturates instead, so
``distance == INFINITY`` always means "no path".
"""

from __future__ import annotations

INFINITY: int = 2**63 - 1

# Returned in place of a vertex index when a search finds nothing.
NOT_FOUND: int = -1


def add_weights(distance: int, weight: int) -> int:
    """Add an edge weight to a distance without leaving the finite range.

    If either operand is ``INFINITY`` the result is ``INFINITY``. A finite
    sum that would reach or pass ``INFINITY`` is clamped to it.
    """
    if distance == INFINITY or weight == INFINITY:
        return INFINITY
    total = distance + weight
    if total >= INFINITY:
        return INFINITY
    return total


def is_finite(distance: int) -> bool:
    return distance != INFINITY
