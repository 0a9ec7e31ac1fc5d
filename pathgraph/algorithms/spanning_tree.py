"""Minimum spanning trees, ignoring edge direction.

Both algorithms treat every directed edge as an undirected connection of the
same weight and return a new `Graph` holding a copy of every input vertex
plus one directed edge per tree edge, oriented and weighted as the input edge
it came from. Self loops never take part in a tree.
"""

from __future__ import annotations

from typing import Iterable

import networkx as nx

from pathgraph.graph.model import Edge, Graph, Vertex
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def _undirected(graph: Graph) -> nx.MultiGraph:
    undirected = nx.MultiGraph()
    undirected.add_nodes_from(graph.vertices)
    for edge in graph.edge_list:
        undirected.add_edge(
            edge.from_vertex, edge.to_vertex, key=edge.key, weight=edge.weight, edge=edge
        )
    return undirected


def _build_tree(graph: Graph, tree_edges: Iterable[Edge], algorithm: str) -> Graph:
    tree, mapping = graph.clone_with_vertices()
    for edge in tree_edges:
        tree.add_edge(mapping[edge.from_vertex], mapping[edge.to_vertex], edge.data)
    logger.debug(
        "%s spanning tree: %d vertices, %d edges, total weight %s",
        algorithm,
        tree.vertex_count,
        tree.edge_count,
        sum(edge.weight for edge in tree.edge_list),
    )
    return tree


def prim(graph: Graph, start: Vertex) -> Graph:
    """Grow a minimum spanning tree from `start` with Prim's algorithm.

    Only the component of `start` is spanned; vertices outside it appear in
    the result without edges.

    Raises:
        ValueError: If `graph` or `start` is None, or `start` is not in the graph.
    """
    if graph is None or start is None:
        raise ValueError("A graph and a start vertex are required.")
    if start not in graph:
        raise ValueError(f"Start vertex {start!r} is not in the graph.")

    undirected = _undirected(graph)
    component = undirected.subgraph(nx.node_connected_component(undirected, start))
    spanning = nx.minimum_spanning_edges(
        component, algorithm="prim", weight="weight", keys=True, data=True
    )
    return _build_tree(graph, (data["edge"] for _, _, _, data in spanning), "Prim")


def kruskal(graph: Graph) -> Graph:
    """Build a minimum spanning forest with Kruskal's algorithm.

    Every component of the graph is spanned, so the result has
    ``vertex_count - components`` edges.

    Raises:
        ValueError: If `graph` is None.
    """
    if graph is None:
        raise ValueError("A graph is required.")

    spanning = nx.minimum_spanning_edges(
        _undirected(graph), algorithm="kruskal", weight="weight", keys=True, data=True
    )
    return _build_tree(graph, (data["edge"] for _, _, _, data in spanning), "Kruskal")
