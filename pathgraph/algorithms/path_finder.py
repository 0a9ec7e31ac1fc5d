"""Weighted A* search between two vertices of a `Graph`.

The open set is a binary heap of tracks keyed by ``(evaluation, sequence)``;
the monotonic sequence number breaks evaluation ties in FIFO order. The
closed set maps each expanded vertex to the lightest track that reached it.

Coefficient semantics:
    - 1.0: tracks ordered by accumulated weight only; uniform-cost search,
      optimal for non-negative weights.
    - 0.0: tracks ordered by heuristic only; greedy best-first search, few
      expansions, no optimality guarantee.
    - In between: optimality depends on the heuristic being admissible and
      scaled compatibly with the blend. This is not validated.

Notes:
    Negative edge weights are rejected with `NegativeWeightError` as soon as
    the search is about to follow one; the closed-set pruning assumes that
    the accumulated weight never decreases along a path.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from pathgraph.algorithms.base import Cost, Heuristic
from pathgraph.algorithms.heuristics import zero_heuristic
from pathgraph.algorithms.track import Track
from pathgraph.config import SEARCH_CONFIG, SearchConfig, validate_coefficient
from pathgraph.errors import NegativeWeightError, SearchLimitExceededError
from pathgraph.graph.model import Edge, Graph, Vertex
from pathgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Outcome of a successful search.

    Attributes:
        edges: Edges from source to target, in path order.
        weight: Sum of the edge weights; equals ``track.weight``.
        track: The track that reached the target.
        expanded: Number of tracks expanded before the target was popped.
    """

    edges: List[Edge]
    weight: Cost
    track: Track
    expanded: int

    @property
    def vertices(self) -> List[Vertex]:
        """Vertices visited by the path, source and target included."""
        if not self.edges:
            return [self.track.end]
        return [self.edges[0].from_vertex] + [edge.to_vertex for edge in self.edges]

    @property
    def number_of_edges(self) -> int:
        return len(self.edges)


def _check_endpoints(graph: Graph, source: Vertex, target: Vertex) -> None:
    if graph is None:
        raise ValueError("A graph is required.")
    if source is None or target is None:
        raise ValueError("Source and target vertices are required.")
    if source not in graph:
        raise ValueError(f"Source vertex {source!r} is not in the graph.")
    if target not in graph:
        raise ValueError(f"Target vertex {target!r} is not in the graph.")


def _check_heuristic(heuristic: Heuristic) -> None:
    if heuristic is None:
        raise ValueError("A heuristic is required.")
    if not callable(heuristic):
        raise TypeError(f"Heuristic must be callable, got {heuristic!r}.")


def _search(
    graph: Graph,
    source: Vertex,
    target: Vertex,
    heuristic: Heuristic,
    coefficient: float,
    max_expansions: Optional[int],
) -> Optional[PathResult]:
    sequence = count()
    root = Track.root(source, target, heuristic, coefficient)
    open_heap: List[Tuple[float, int, Track]] = [(root.evaluation, next(sequence), root)]
    closed: Dict[Vertex, Track] = {}
    expanded = 0

    while open_heap:
        key, _, track = heappop(open_heap)

        # Evaluation is not cached; re-key a track whose priority grew
        # since it was pushed instead of trusting the stale heap key.
        evaluation = track.evaluation
        if evaluation > key:
            heappush(open_heap, (evaluation, next(sequence), track))
            continue

        if track.succeed:
            logger.debug(
                "Path found: %d edges, weight %s, %d tracks expanded",
                track.number_of_edges_visited,
                track.weight,
                expanded,
            )
            return PathResult(track.edges(), track.weight, track, expanded)

        best = closed.get(track.end)
        if best is not None and best.weight <= track.weight:
            continue
        closed[track.end] = track

        if max_expansions is not None and expanded >= max_expansions:
            raise SearchLimitExceededError(
                f"Search expanded {expanded} tracks without reaching {target!r}."
            )
        expanded += 1

        for edge in graph.iter_emanating_edges(track.end):
            if edge.weight < 0:
                raise NegativeWeightError(f"{edge!r} has a negative weight.")
            child = Track.extend(track, edge)
            heappush(open_heap, (child.evaluation, next(sequence), child))

    logger.debug("No path from %r to %r (%d tracks expanded)", source, target, expanded)
    return None


class PathFinder:
    """Reusable weighted A* searcher bound to one graph.

    The instance remembers the outcome of its last `search`; it is therefore
    not meant to be shared between threads. Use one instance per thread, or
    `find_path`, which keeps no state at all.
    """

    def __init__(
        self,
        graph: Graph,
        heuristic: Heuristic = zero_heuristic,
        coefficient: Optional[float] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        """Initialize a PathFinder.

        Args:
            graph: The graph to search.
            heuristic: Estimates the remaining cost between two vertices.
            coefficient: Blend in [0, 1]; defaults to
                ``config.default_coefficient``.
            config: Search settings; defaults to the global `SEARCH_CONFIG`.

        Raises:
            ValueError: If the graph or heuristic is None, or the coefficient
                lies outside [0, 1].
            TypeError: If the heuristic is not callable.
        """
        if graph is None:
            raise ValueError("A graph is required.")
        _check_heuristic(heuristic)
        self.config = config if config is not None else SEARCH_CONFIG
        if coefficient is None:
            coefficient = self.config.default_coefficient
        self.graph = graph
        self.heuristic = heuristic
        self.coefficient = validate_coefficient(coefficient)
        self._source: Optional[Vertex] = None
        self._target: Optional[Vertex] = None
        self._result: Optional[PathResult] = None

    @property
    def source(self) -> Optional[Vertex]:
        """Source vertex of the last search."""
        return self._source

    @property
    def target(self) -> Optional[Vertex]:
        """Target vertex of the last search."""
        return self._target

    @property
    def is_path_found(self) -> bool:
        return self._result is not None

    @property
    def last_result(self) -> Optional[PathResult]:
        return self._result

    def get_found_path(self) -> Optional[List[Edge]]:
        """Edges of the path found by the last search, or None."""
        if self._result is None:
            return None
        return list(self._result.edges)

    def search(self, source: Vertex, target: Vertex) -> Optional[PathResult]:
        """Search the best path from `source` to `target`.

        Returns:
            The `PathResult`, or None if `target` is unreachable.

        Raises:
            ValueError: If either vertex is None or not in the graph.
            NegativeWeightError: If the search meets a negative edge weight.
            SearchLimitExceededError: If ``config.max_expansions`` is exceeded.
        """
        _check_endpoints(self.graph, source, target)
        self._source = source
        self._target = target
        self._result = None
        logger.debug(
            "Searching %r -> %r (coefficient=%s)", source, target, self.coefficient
        )
        self._result = _search(
            self.graph,
            source,
            target,
            self.heuristic,
            self.coefficient,
            self.config.max_expansions,
        )
        return self._result


def find_path(
    graph: Graph,
    source: Vertex,
    target: Vertex,
    heuristic: Heuristic = zero_heuristic,
    coefficient: Optional[float] = None,
) -> Optional[List[Edge]]:
    """Find a path from `source` to `target` with weighted A*.

    Args:
        graph: The graph to search.
        source: Start vertex.
        target: Goal vertex.
        heuristic: Estimates the remaining cost between two vertices.
        coefficient: Blend in [0, 1] between weight (1) and heuristic (0);
            defaults to ``SEARCH_CONFIG.default_coefficient``.

    Returns:
        The path's edges in order (empty when ``source is target``), or None
        if `target` cannot be reached.

    Raises:
        ValueError: On missing arguments, vertices outside the graph, or a
            coefficient outside [0, 1].
        NegativeWeightError: If the search meets a negative edge weight.
    """
    result = PathFinder(graph, heuristic, coefficient).search(source, target)
    return None if result is None else result.edges
