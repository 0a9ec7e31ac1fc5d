"""Single-source Dijkstra over `VertexInfo` scratch slots.

Unlike the track-based `PathFinder`, this keeps one `VertexInfo` per vertex
and reconstructs paths from parent-edge pointers, which is lighter when only
plain shortest paths (coefficient 1) are needed.
"""

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Tuple

from pathgraph.algorithms.base import Cost
from pathgraph.algorithms.vertex_info import VertexInfoTable
from pathgraph.errors import NegativeWeightError
from pathgraph.graph.model import Edge, Graph, Vertex
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def shortest_paths(graph: Graph, source: Vertex) -> VertexInfoTable:
    """Compute minimal distances from `source` to every reachable vertex.

    Args:
        graph: The graph to search.
        source: The vertex distances are measured from.

    Returns:
        A `VertexInfoTable` where reached vertices carry their distance and
        the edge followed to reach them; unreached vertices keep ``inf``.

    Raises:
        ValueError: If `graph` or `source` is None, or `source` is not in graph.
        NegativeWeightError: If a negative edge weight is encountered.
    """
    if graph is None or source is None:
        raise ValueError("A graph and a source vertex are required.")
    if source not in graph:
        raise ValueError(f"Source vertex {source!r} is not in the graph.")

    infos = VertexInfoTable(graph)
    infos[source].distance = 0.0

    sequence = count()
    min_pq: List[Tuple[Cost, int, Vertex]] = [(0.0, next(sequence), source)]

    while min_pq:
        _, _, vertex = heappop(min_pq)
        info = infos[vertex]
        if info.is_finalised:
            continue
        info.is_finalised = True

        for edge in graph.iter_emanating_edges(vertex):
            weight = edge.weight
            if weight < 0:
                raise NegativeWeightError(f"{edge!r} has a negative weight.")
            partner_info = infos[edge.to_vertex]
            distance = info.distance + weight
            if distance < partner_info.distance:
                partner_info.distance = distance
                partner_info.edge_followed = edge
                heappush(min_pq, (distance, next(sequence), edge.to_vertex))

    return infos


def find_shortest_path(
    graph: Graph, source: Vertex, target: Vertex
) -> Optional[List[Edge]]:
    """Return a minimal-weight path from `source` to `target`, or None.

    Raises:
        ValueError: If `target` is None or not in the graph (see also
            `shortest_paths`).
    """
    if target is None or (graph is not None and target not in graph):
        raise ValueError(f"Target vertex {target!r} is not in the graph.")
    return shortest_paths(graph, source).path_to(target)


def shortest_path_tree(graph: Graph, source: Vertex) -> Graph:
    """Build the shortest-path tree rooted at `source` as a new graph.

    The tree holds the payload of every reachable vertex and, for each
    non-source vertex, the edge (with its original payload) through which
    its minimal distance was reached.
    """
    infos = shortest_paths(graph, source)
    tree, mapping = graph.clone_with_vertices(
        vertex for vertex, info in infos if info.is_finalised
    )
    for vertex, info in infos:
        edge = info.edge_followed
        if edge is not None and vertex is not source:
            tree.add_edge(mapping[edge.from_vertex], mapping[vertex], edge.data)

    logger.debug(
        "Shortest-path tree from %r: %d vertices, %d edges",
        source,
        tree.vertex_count,
        tree.edge_count,
    )
    return tree
