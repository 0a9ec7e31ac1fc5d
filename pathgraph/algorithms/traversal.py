"""Depth-first and breadth-first traversal from a start vertex.

Traversals follow emanating edges in insertion order and visit each vertex
once. They are lazy: stop iterating to end a traversal early.
"""

from __future__ import annotations

from typing import Iterator

import networkx as nx

from pathgraph.graph.model import Edge, Graph, Vertex


def _check_start(graph: Graph, start: Vertex) -> None:
    if graph is None or start is None:
        raise ValueError("A graph and a start vertex are required.")
    if start not in graph:
        raise ValueError(f"Start vertex {start!r} is not in the graph.")


def _tree_edges(graph: Graph, pairs: Iterator[tuple]) -> Iterator[Edge]:
    for u, v in pairs:
        yield graph.get_emanating_edge_to(u, v)


def _with_start(start: Vertex, pairs: Iterator[tuple]) -> Iterator[Vertex]:
    yield start
    for _, vertex in pairs:
        yield vertex


def depth_first(graph: Graph, start: Vertex, postorder: bool = False) -> Iterator[Vertex]:
    """Yield the vertices reachable from `start` in depth-first order.

    Args:
        graph: The graph to traverse.
        start: First vertex visited.
        postorder: Yield each vertex after all vertices reached through it,
            instead of before them.

    Raises:
        ValueError: If `start` is None or not in the graph.
    """
    _check_start(graph, start)
    if postorder:
        return nx.dfs_postorder_nodes(graph, start)
    return nx.dfs_preorder_nodes(graph, start)


def breadth_first(graph: Graph, start: Vertex) -> Iterator[Vertex]:
    """Yield `start`, then the vertices reachable from it by increasing hop count.

    Raises:
        ValueError: If `start` is None or not in the graph.
    """
    _check_start(graph, start)
    return _with_start(start, nx.bfs_edges(graph, start))


def depth_first_edges(graph: Graph, start: Vertex) -> Iterator[Edge]:
    """Yield the edges of the depth-first tree rooted at `start`, in visit order.

    Between parallel edges the first inserted one is reported.
    """
    _check_start(graph, start)
    return _tree_edges(graph, nx.dfs_edges(graph, start))


def breadth_first_edges(graph: Graph, start: Vertex) -> Iterator[Edge]:
    """Yield the edges of the breadth-first tree rooted at `start`, in visit order.

    Between parallel edges the first inserted one is reported.
    """
    _check_start(graph, start)
    return _tree_edges(graph, nx.bfs_edges(graph, start))
