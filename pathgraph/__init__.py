"""pathgraph: weighted graph pathfinding.

pathgraph finds routes through weighted directed graphs with a weighted A*
search whose coefficient slides between exact Dijkstra ordering (1.0) and
greedy best-first ordering (0.0).

Primary API:
    Graph, Vertex, Edge, WeightData - graph model (networkx-backed)
    find_path() - one-shot search returning the path's edges or None
    PathFinder - reusable searcher returning a PathResult
    shortest_paths() - VertexInfo-based single-source Dijkstra
    depth_first(), breadth_first() - lazy traversals
    prim(), kruskal() - minimum spanning trees

Example:
    from pathgraph import Graph, WeightData, find_path

    graph = Graph()
    a, b, c = graph.add_vertex("A"), graph.add_vertex("B"), graph.add_vertex("C")
    graph.add_edge(a, b, WeightData(2))
    graph.add_edge(b, c, WeightData(3))
    graph.add_edge(a, c, WeightData(10))

    path = find_path(graph, a, c)  # [A->B, B->C]
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph._version import __version__
from pathgraph.algorithms import (
    EDGE_WEIGHT_COMPARER,
    EdgeWeightComparer,
    PathFinder,
    PathResult,
    Position,
    Track,
    VertexInfo,
    VertexInfoTable,
    breadth_first,
    depth_first,
    euclidean_distance,
    find_path,
    find_shortest_path,
    kruskal,
    manhattan_distance,
    max_distance_along_axis,
    prim,
    shortest_path_tree,
    shortest_paths,
    square_euclidean_distance,
    zero_heuristic,
)
from pathgraph.config import SEARCH_CONFIG, SearchConfig
from pathgraph.errors import (
    DuplicateVertexError,
    NegativeWeightError,
    PathGraphError,
    SearchLimitExceededError,
)
from pathgraph.graph import Edge, Graph, Vertex, WeightData

__all__ = [
    "__version__",
    "logging",
    "DuplicateVertexError",
    "EDGE_WEIGHT_COMPARER",
    "Edge",
    "EdgeWeightComparer",
    "Graph",
    "NegativeWeightError",
    "PathFinder",
    "PathGraphError",
    "PathResult",
    "Position",
    "SEARCH_CONFIG",
    "SearchConfig",
    "SearchLimitExceededError",
    "Track",
    "Vertex",
    "VertexInfo",
    "VertexInfoTable",
    "WeightData",
    "breadth_first",
    "depth_first",
    "euclidean_distance",
    "find_path",
    "find_shortest_path",
    "kruskal",
    "manhattan_distance",
    "max_distance_along_axis",
    "prim",
    "shortest_path_tree",
    "shortest_paths",
    "square_euclidean_distance",
    "zero_heuristic",
]
