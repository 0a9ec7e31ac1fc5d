from __future__ import annotations

from typing import Callable, Union

from pathgraph.graph.model import Vertex

#: Represents a numeric path cost (sum of edge weights).
Cost = Union[int, float]

#: Estimates the remaining cost between two vertices. Must be pure and
#: non-negative; admissibility is the caller's responsibility.
Heuristic = Callable[[Vertex, Vertex], float]

#: Coefficient that orders tracks by accumulated weight only (Dijkstra).
DIJKSTRA_COEFFICIENT = 1.0

#: Coefficient that orders tracks by heuristic estimate only (greedy best-first).
GREEDY_COEFFICIENT = 0.0
