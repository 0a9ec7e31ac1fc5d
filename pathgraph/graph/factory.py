"""Index-driven generators for common graph shapes.

Every generator builds vertex payloads through a vertex creation function
``f(index) -> payload`` (stored as the graph's ``vertex_factory``), so the
usual duplicate-payload rules apply. Connections are undirected in spirit and
emitted as a pair of opposite directed edges. An optional
``edge_function(from_index, to_index) -> payload`` supplies edge weights;
without it edges carry no payload and weigh 0.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from pathgraph.graph.model import Graph, Vertex, VertexFactory

EdgeFunction = Callable[[int, int], Any]


def _connect(
    graph: Graph,
    vertices: List[Vertex],
    a: int,
    b: int,
    edge_function: Optional[EdgeFunction],
) -> None:
    forward = edge_function(a, b) if edge_function is not None else None
    backward = edge_function(b, a) if edge_function is not None else None
    graph.add_edge(vertices[a], vertices[b], forward)
    graph.add_edge(vertices[b], vertices[a], backward)


def create_path(
    vertex_count: int,
    vertex_function: VertexFactory,
    edge_function: Optional[EdgeFunction] = None,
) -> Graph:
    """Create a path graph ``0 - 1 - ... - (vertex_count - 1)``.

    Raises:
        ValueError: If `vertex_count` is below 2.
    """
    if vertex_count < 2:
        raise ValueError("A path graph needs at least 2 vertices.")
    graph = Graph(vertex_factory=vertex_function)
    vertices = [graph.create_vertex(i) for i in range(vertex_count)]
    for i in range(1, vertex_count):
        _connect(graph, vertices, i - 1, i, edge_function)
    return graph


def create_circle(
    vertex_count: int,
    vertex_function: VertexFactory,
    edge_function: Optional[EdgeFunction] = None,
) -> Graph:
    """Create a cycle graph where the last vertex connects back to the first.

    Raises:
        ValueError: If `vertex_count` is below 3.
    """
    if vertex_count < 3:
        raise ValueError("A circle graph needs at least 3 vertices.")
    graph = Graph(vertex_factory=vertex_function)
    vertices = [graph.create_vertex(i) for i in range(vertex_count)]
    for i in range(vertex_count):
        _connect(graph, vertices, i, (i + 1) % vertex_count, edge_function)
    return graph


def create_star(
    order: int,
    vertex_function: VertexFactory,
    edge_function: Optional[EdgeFunction] = None,
) -> Graph:
    """Create a star: vertex 0 in the centre, connected to vertices 1..order-1.

    Raises:
        ValueError: If `order` is below 1.
    """
    if order < 1:
        raise ValueError("A star graph needs an order of at least 1.")
    graph = Graph(vertex_factory=vertex_function)
    vertices = [graph.create_vertex(i) for i in range(order)]
    for i in range(1, order):
        _connect(graph, vertices, 0, i, edge_function)
    return graph


def create_complete(
    vertex_count: int,
    vertex_function: VertexFactory,
    edge_function: Optional[EdgeFunction] = None,
) -> Graph:
    """Create a complete graph: every vertex connects to every other vertex.

    Raises:
        ValueError: If `vertex_count` is below 1.
    """
    if vertex_count < 1:
        raise ValueError("A complete graph needs at least 1 vertex.")
    graph = Graph(vertex_factory=vertex_function)
    vertices = [graph.create_vertex(i) for i in range(vertex_count)]
    for a in range(vertex_count):
        for b in range(a + 1, vertex_count):
            _connect(graph, vertices, a, b, edge_function)
    return graph


def create_grid(
    width: int,
    height: int,
    vertex_function: VertexFactory,
    edge_function: Optional[EdgeFunction] = None,
) -> Graph:
    """Create a 4-neighbour grid of ``width * height`` vertices.

    Vertex ``index`` sits at column ``index % width`` and row
    ``index // width``; horizontal and vertical neighbours are connected.

    Raises:
        ValueError: If `width` or `height` is below 1.
    """
    if width < 1 or height < 1:
        raise ValueError("A grid graph needs a positive width and height.")
    graph = Graph(vertex_factory=vertex_function)
    vertices = [graph.create_vertex(i) for i in range(width * height)]
    for row in range(height):
        for col in range(width):
            index = row * width + col
            if col + 1 < width:
                _connect(graph, vertices, index, index + 1, edge_function)
            if row + 1 < height:
                _connect(graph, vertices, index, index + width, edge_function)
    return graph
