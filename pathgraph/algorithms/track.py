"""Candidate partial paths used by the weighted A* search.

A `Track` ends at a vertex and links back to the track it was extended from,
so the whole path can be rebuilt from the last track alone. Tracks of one
search share their common prefixes by reference and are never mutated after
construction.

The evaluation of a track blends the accumulated weight with the heuristic
estimate of the remaining cost::

    evaluation = coefficient * weight + (1 - coefficient) * heuristic(end, target)

A coefficient of 1 orders tracks purely by weight (Dijkstra); 0 orders them
purely by the estimate (greedy best-first).
"""

from __future__ import annotations

from typing import Any, List, Optional

from pathgraph.algorithms.base import Cost, Heuristic
from pathgraph.config import validate_coefficient
from pathgraph.graph.model import Edge, Vertex


class Track:
    """One node of the search frontier or closed set.

    Build tracks with `Track.root` and `Track.extend`. Equality and hashing
    stay identity based; the rich comparisons order tracks by `evaluation`.
    """

    __slots__ = (
        "_end",
        "_target",
        "_heuristic",
        "_coefficient",
        "_previous_track",
        "_edge",
        "_weight",
        "_number_of_edges_visited",
    )

    def __init__(
        self,
        end: Vertex,
        target: Vertex,
        heuristic: Heuristic,
        coefficient: float,
        previous_track: Optional[Track] = None,
        edge: Optional[Edge] = None,
    ) -> None:
        if end is None or target is None:
            raise ValueError("Track end and target vertices are required.")
        if heuristic is None:
            raise ValueError("A heuristic is required.")
        if not callable(heuristic):
            raise TypeError(f"Heuristic must be callable, got {heuristic!r}.")
        if (previous_track is None) != (edge is None):
            raise ValueError("previous_track and edge must be given together.")

        self._end = end
        self._target = target
        self._heuristic = heuristic
        self._coefficient = validate_coefficient(coefficient)
        self._previous_track = previous_track
        self._edge = edge

        if previous_track is None:
            self._weight: Cost = 0.0
            self._number_of_edges_visited = 0
        else:
            self._weight = previous_track._weight + edge.weight
            self._number_of_edges_visited = previous_track._number_of_edges_visited + 1

    @classmethod
    def root(
        cls,
        source: Vertex,
        target: Vertex,
        heuristic: Heuristic,
        coefficient: float = 1.0,
    ) -> Track:
        """Create the track a search starts from: weight 0, no edges."""
        return cls(source, target, heuristic, coefficient)

    @classmethod
    def extend(cls, previous_track: Track, edge: Edge) -> Track:
        """Create the track reached by following `edge` from `previous_track`.

        Raises:
            ValueError: If `edge` does not start where `previous_track` ends.
        """
        if edge.from_vertex is not previous_track._end:
            raise ValueError(f"{edge!r} does not start at {previous_track._end!r}.")
        return cls(
            edge.to_vertex,
            previous_track._target,
            previous_track._heuristic,
            previous_track._coefficient,
            previous_track=previous_track,
            edge=edge,
        )

    @property
    def end(self) -> Vertex:
        return self._end

    @property
    def target(self) -> Vertex:
        return self._target

    @property
    def heuristic(self) -> Heuristic:
        return self._heuristic

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def previous_track(self) -> Optional[Track]:
        return self._previous_track

    @property
    def edge(self) -> Optional[Edge]:
        """The edge followed to reach `end`; None for the root track."""
        return self._edge

    @property
    def weight(self) -> Cost:
        """Sum of the edge weights from the search root to `end`."""
        return self._weight

    @property
    def number_of_edges_visited(self) -> int:
        return self._number_of_edges_visited

    @property
    def succeed(self) -> bool:
        """Whether this track ends at its target."""
        return self._end is self._target

    @property
    def evaluation(self) -> float:
        """Priority of this track; recomputed on every access."""
        coefficient = self._coefficient
        if coefficient == 1.0:
            return self._weight
        if coefficient == 0.0:
            return self._heuristic(self._end, self._target)
        return coefficient * self._weight + (1.0 - coefficient) * self._heuristic(
            self._end, self._target
        )

    def edges(self) -> List[Edge]:
        """Return the edges from the search root to `end`, in path order."""
        path: List[Edge] = []
        track: Optional[Track] = self
        while track is not None and track._edge is not None:
            path.append(track._edge)
            track = track._previous_track
        path.reverse()
        return path

    def compare_to(self, other: Optional[Track]) -> int:
        """Compare evaluations; any track sorts before None."""
        if other is None:
            return -1
        mine = self.evaluation
        theirs = other.evaluation
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.evaluation < other.evaluation

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.evaluation <= other.evaluation

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.evaluation > other.evaluation

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.evaluation >= other.evaluation

    def __repr__(self) -> str:
        return (
            f"Track(end={self._end!r}, weight={self._weight}, "
            f"edges={self._number_of_edges_visited})"
        )


def same_end_vertex(left: Track, right: Track) -> bool:
    """Equivalence used for the closed set: both tracks end at the same vertex."""
    return left.end is right.end
