"""Structural operations on a `Graph`.

`edge_complement` builds a new graph; `cut` and `contract` modify the graph
they are given in place. Edges created by these operations carry no payload
unless noted otherwise.
"""

from __future__ import annotations

from typing import List

from pathgraph.graph.model import Edge, Graph, Vertex


def _neighbours(graph: Graph, vertex: Vertex) -> List[Vertex]:
    """Distinct vertices joined to `vertex` by an edge in either direction."""
    seen = {vertex}
    found = []
    for edge in graph.emanating_edges(vertex) + graph.incoming_edges(vertex):
        partner = edge.get_partner_vertex(vertex)
        if partner not in seen:
            seen.add(partner)
            found.append(partner)
    return found


def _joined(graph: Graph, a: Vertex, b: Vertex) -> bool:
    return b in graph.succ[a] or a in graph.succ[b]


def edge_complement(graph: Graph) -> Graph:
    """Return a graph joining exactly the vertex pairs `graph` leaves unjoined.

    The result holds a copy of every vertex. For each pair of distinct
    vertices with no edge between them in either direction it gets an edge
    in both directions.
    """
    complement, mapping = graph.clone_with_vertices()
    vertices = graph.vertices
    for a in vertices:
        for b in vertices:
            if a is not b and not _joined(graph, a, b):
                complement.add_edge(mapping[a], mapping[b])
    return complement


def cut(graph: Graph, vertex: Vertex) -> List[Edge]:
    """Remove `vertex` and join its former neighbours to each other.

    Every ordered pair of distinct former neighbours (vertices with an edge
    to or from `vertex`) that is not yet connected in that direction gets a
    new edge.

    Returns:
        The edges added to fill the cut.

    Raises:
        ValueError: If `vertex` is not in the graph.
    """
    if vertex not in graph:
        raise ValueError(f"{vertex!r} does not exist.")
    neighbours = _neighbours(graph, vertex)
    graph.remove_node(vertex)

    added = []
    for a in neighbours:
        for b in neighbours:
            if a is not b and b not in graph.succ[a]:
                added.append(graph.add_edge(a, b))
    return added


def contract(graph: Graph, edge: Edge, discard_extra_adjacent_edges: bool = True) -> Vertex:
    """Merge the source of `edge` into its target.

    Every edge between the two endpoints is dropped, the source vertex is
    removed, and each of its other edges is re-attached to the target with
    its direction and payload preserved.

    Args:
        graph: The graph to modify.
        edge: The edge to contract.
        discard_extra_adjacent_edges: Skip a re-attached edge when the target
            is already connected to that vertex in the same direction.

    Returns:
        The surviving vertex (the target of `edge`).

    Raises:
        ValueError: If `edge` is not part of the graph.
    """
    if edge is None or not graph.has_edge_by_id(edge.key) or graph.get_edge(edge.key) is not edge:
        raise ValueError(f"{edge!r} is not part of the graph.")
    removed, kept = edge.from_vertex, edge.to_vertex

    outgoing = [e for e in graph.emanating_edges(removed) if e.to_vertex not in (removed, kept)]
    incoming = [e for e in graph.incoming_edges(removed) if e.from_vertex not in (removed, kept)]
    graph.remove_node(removed)

    for e in outgoing:
        if not (discard_extra_adjacent_edges and e.to_vertex in graph.succ[kept]):
            graph.add_edge(kept, e.to_vertex, e.data)
    for e in incoming:
        if not (discard_extra_adjacent_edges and kept in graph.succ[e.from_vertex]):
            graph.add_edge(e.from_vertex, kept, e.data)
    return kept
