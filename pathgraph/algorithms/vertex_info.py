"""Per-search scratch records for array-based relaxation algorithms.

`VertexInfoTable` holds one `VertexInfo` slot per vertex index of a graph.
Tables are created for a single search and never stored on the graph or its
vertices, so several searches may share one graph.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from pathgraph.algorithms.base import Cost
from pathgraph.graph.model import Edge, Graph, Vertex


@dataclass
class VertexInfo:
    """Relaxation state of one vertex.

    Attributes:
        distance: Best known distance from the source; ``inf`` when unreached.
        edge_followed: Edge through which `distance` was achieved.
        is_finalised: Whether `distance` is settled.
    """

    distance: Cost = math.inf
    edge_followed: Optional[Edge] = None
    is_finalised: bool = False


class VertexInfoTable:
    """One `VertexInfo` per vertex of `graph`, addressed by vertex or index."""

    def __init__(self, graph: Graph) -> None:
        self._index: Dict[Vertex, int] = {
            vertex: index for index, vertex in enumerate(graph.vertices)
        }
        self._slots: List[VertexInfo] = [VertexInfo() for _ in self._index]

    def __getitem__(self, vertex: Vertex) -> VertexInfo:
        try:
            return self._slots[self._index[vertex]]
        except KeyError:
            raise KeyError(f"{vertex!r} is not part of the searched graph.") from None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Tuple[Vertex, VertexInfo]]:
        for vertex, index in self._index.items():
            yield vertex, self._slots[index]

    def slot(self, index: int) -> VertexInfo:
        """Return the record stored at vertex index `index`."""
        return self._slots[index]

    def index_of(self, vertex: Vertex) -> int:
        return self._index[vertex]

    def distances(self) -> Dict[Vertex, Cost]:
        """Map every reached vertex to its distance."""
        return {
            vertex: info.distance for vertex, info in self if info.distance < math.inf
        }

    def path_to(self, vertex: Vertex) -> Optional[List[Edge]]:
        """Follow `edge_followed` pointers back from `vertex` to the source.

        Returns:
            The edges in source-to-vertex order, an empty list for the source
            itself, or None if `vertex` was never reached.
        """
        info = self[vertex]
        if info.distance == math.inf:
            return None
        path: List[Edge] = []
        while info.edge_followed is not None:
            edge = info.edge_followed
            path.append(edge)
            info = self[edge.from_vertex]
        path.reverse()
        return path
