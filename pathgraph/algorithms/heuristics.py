"""Distance heuristics for vertices that carry a 2D position.

A positionable payload is either a ``(x, y)`` pair, an object with ``x`` and
``y`` attributes (such as `Position`), or an object whose ``position``
attribute is one of those.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pathgraph.graph.model import Vertex


@dataclass(frozen=True)
class Position:
    """Hashable 2D vertex payload, optionally named."""

    x: float
    y: float
    name: Optional[str] = None


def position_of(vertex: Vertex) -> Tuple[float, float]:
    """Return the ``(x, y)`` coordinates stored in a vertex payload.

    Raises:
        TypeError: If the payload carries no position.
    """
    data: Any = vertex.data
    if hasattr(data, "position"):
        data = data.position
    if hasattr(data, "x") and hasattr(data, "y"):
        return float(data.x), float(data.y)
    try:
        x, y = data
    except (TypeError, ValueError):
        raise TypeError(f"Vertex payload {vertex.data!r} has no 2D position.") from None
    return float(x), float(y)


def _deltas(left: Vertex, right: Vertex) -> Tuple[float, float]:
    lx, ly = position_of(left)
    rx, ry = position_of(right)
    return lx - rx, ly - ry


def zero_heuristic(left: Vertex, right: Vertex) -> float:
    """Estimate nothing; turns weighted A* into uniform-cost search."""
    return 0.0


def euclidean_distance(left: Vertex, right: Vertex) -> float:
    """Straight-line distance between two positioned vertices."""
    dx, dy = _deltas(left, right)
    return math.hypot(dx, dy)


def square_euclidean_distance(left: Vertex, right: Vertex) -> float:
    """Squared straight-line distance; cheaper, but not admissible in general."""
    dx, dy = _deltas(left, right)
    return dx * dx + dy * dy


def manhattan_distance(left: Vertex, right: Vertex) -> float:
    """Sum of the axis distances; admissible on 4-neighbour grids."""
    dx, dy = _deltas(left, right)
    return abs(dx) + abs(dy)


def max_distance_along_axis(left: Vertex, right: Vertex) -> float:
    """Largest axis distance (Chebyshev); admissible on 8-neighbour grids."""
    dx, dy = _deltas(left, right)
    return max(abs(dx), abs(dy))
