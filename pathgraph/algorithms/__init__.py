"""Search algorithms over `pathgraph.graph.Graph`."""

from pathgraph.algorithms.comparers import (
    EDGE_WEIGHT_COMPARER,
    EdgeWeightComparer,
    sorted_by_weight,
)
from pathgraph.algorithms.dijkstra import (
    find_shortest_path,
    shortest_path_tree,
    shortest_paths,
)
from pathgraph.algorithms.heuristics import (
    Position,
    euclidean_distance,
    manhattan_distance,
    max_distance_along_axis,
    square_euclidean_distance,
    zero_heuristic,
)
from pathgraph.algorithms.path_finder import PathFinder, PathResult, find_path
from pathgraph.algorithms.spanning_tree import kruskal, prim
from pathgraph.algorithms.track import Track, same_end_vertex
from pathgraph.algorithms.traversal import (
    breadth_first,
    breadth_first_edges,
    depth_first,
    depth_first_edges,
)
from pathgraph.algorithms.vertex_info import VertexInfo, VertexInfoTable

__all__ = [
    "EDGE_WEIGHT_COMPARER",
    "EdgeWeightComparer",
    "PathFinder",
    "PathResult",
    "Position",
    "Track",
    "VertexInfo",
    "VertexInfoTable",
    "breadth_first",
    "breadth_first_edges",
    "depth_first",
    "depth_first_edges",
    "euclidean_distance",
    "find_path",
    "find_shortest_path",
    "kruskal",
    "manhattan_distance",
    "max_distance_along_axis",
    "prim",
    "same_end_vertex",
    "shortest_path_tree",
    "shortest_paths",
    "sorted_by_weight",
    "square_euclidean_distance",
    "zero_heuristic",
]
