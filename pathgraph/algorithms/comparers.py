"""Total ordering of edges by weight."""

from __future__ import annotations

from typing import Iterable, List

from pathgraph.graph.model import Edge


class EdgeWeightComparer:
    """Stateless comparer ordering edges by ascending weight.

    An edge without payload weighs 0. Use the shared `instance` (also exported
    as `EDGE_WEIGHT_COMPARER`); `key` plugs into `sorted`.
    """

    instance: "EdgeWeightComparer"

    __slots__ = ()

    def __new__(cls) -> "EdgeWeightComparer":
        try:
            return cls.instance
        except AttributeError:
            return super().__new__(cls)

    @staticmethod
    def compare(x: Edge, y: Edge) -> int:
        """Return a negative, zero or positive number as x weighs less, the same or more than y."""
        x_weight = x.weight
        y_weight = y.weight
        if x_weight < y_weight:
            return -1
        if x_weight > y_weight:
            return 1
        return 0

    @staticmethod
    def key(edge: Edge) -> float:
        return edge.weight

    def __repr__(self) -> str:
        return "EdgeWeightComparer()"


EdgeWeightComparer.instance = EdgeWeightComparer()
EDGE_WEIGHT_COMPARER = EdgeWeightComparer.instance


def sorted_by_weight(edges: Iterable[Edge]) -> List[Edge]:
    """Return `edges` sorted by ascending weight; ties keep their input order."""
    return sorted(edges, key=EDGE_WEIGHT_COMPARER.key)
