"""Weighted directed graph with vertex payloads and weight-bearing edges.

`Graph` extends `networkx.MultiDiGraph`. Its nodes are `Vertex` objects
(compared by identity) and every edge attribute dict carries the numeric
``weight`` and the `Edge` object itself under ``edge``, so read-only networkx
algorithms can run on a `Graph` directly. Bulk insertion (`add_nodes_from`,
`add_edges_from`) goes through the same checks as single insertion, and
`copy` keeps the graph settings and edge keys.

The graph is meant to be built once and then searched many times. Searches
keep all their scratch state outside the graph, which makes concurrent
read-only searches safe as long as nobody mutates the graph meanwhile.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from pickle import dumps, loads
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

from pathgraph.errors import DuplicateVertexError

EdgeID = int
VertexFactory = Callable[[int], Any]


@dataclass
class WeightData:
    """Edge payload carrying a weight."""

    weight: float = 0.0


def weight_of(data: Any) -> float:
    """Return the weight carried by an edge payload.

    ``None`` weighs 0, a plain number is its own weight, and anything else
    must expose a numeric ``weight`` attribute.

    Raises:
        TypeError: If the payload carries no usable weight.
    """
    if data is None:
        return 0.0
    if isinstance(data, Real) and not isinstance(data, bool):
        return float(data)
    weight = getattr(data, "weight", None)
    if isinstance(weight, Real) and not isinstance(weight, bool):
        return float(weight)
    raise TypeError(f"Edge payload {data!r} has no numeric 'weight'.")


class Vertex:
    """A graph vertex holding an opaque payload.

    Vertices are hashed and compared by identity; the payload is only
    compared when the vertex is inserted into a `Graph`.
    """

    __slots__ = ("data", "__weakref__")

    def __init__(self, data: Any = None) -> None:
        self.data = data

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


class Edge:
    """A directed edge between two vertices of one `Graph`."""

    __slots__ = ("from_vertex", "to_vertex", "key", "data", "__weakref__")

    def __init__(
        self, from_vertex: Vertex, to_vertex: Vertex, key: EdgeID, data: Any = None
    ) -> None:
        self.from_vertex = from_vertex
        self.to_vertex = to_vertex
        self.key = key
        self.data = data

    @property
    def weight(self) -> float:
        """Weight of the edge; 0 when it carries no payload."""
        return weight_of(self.data)

    def get_partner_vertex(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to `vertex`.

        Raises:
            ValueError: If `vertex` is not an endpoint of this edge.
        """
        if vertex is self.from_vertex:
            return self.to_vertex
        if vertex is self.to_vertex:
            return self.from_vertex
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}.")

    def __repr__(self) -> str:
        return (
            f"Edge({self.from_vertex.data!r} -> {self.to_vertex.data!r}, "
            f"key={self.key}, weight={self.weight})"
        )


class Graph(nx.MultiDiGraph):
    """A directed multigraph of `Vertex` objects connected by `Edge` objects.

    This class enforces:
      - Only `Vertex` instances may be nodes.
      - No two vertices with equal (non-None) payloads.
      - No automatic creation of missing vertices when adding an edge.
      - Self loops only when ``allow_self_loops`` is set.
      - Parallel edges only when ``allow_multiple_edges`` is set.
      - Unique integer edge keys, assigned from a monotonic counter.

    Outgoing and incoming edges are reported in insertion order.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(
        self,
        vertex_factory: Optional[VertexFactory] = None,
        allow_self_loops: bool = False,
        allow_multiple_edges: bool = True,
        **attr: Any,
    ) -> None:
        """Initialize an empty Graph.

        Args:
            vertex_factory: Builds a vertex payload from an index; used by
                `create_vertex`.
            allow_self_loops: Whether edges may start and end at one vertex.
            allow_multiple_edges: Whether several edges may connect the same
                ordered pair of vertices.
            **attr: Graph attributes forwarded to networkx.
        """
        super().__init__(**attr)
        self.vertex_factory = vertex_factory
        self.allow_self_loops = allow_self_loops
        self.allow_multiple_edges = allow_multiple_edges
        self._edges: Dict[EdgeID, Edge] = {}
        self._emanating: Dict[Vertex, List[Edge]] = {}
        self._incoming: Dict[Vertex, List[Edge]] = {}
        # Hashable payloads are indexed; the rest fall back to a scan.
        self._payload_index: Dict[Any, Vertex] = {}
        self._unhashable_payloads: List[Vertex] = []
        self._next_edge_id: int = 0

    def new_edge_key(self, u: Any, v: Any, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge key.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``;
        removed edges never give their key back.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self, as_view: bool = False, pickle: bool = True) -> Graph:
        """Create a copy of this graph.

        By default, use a pickle-based deep copy: vertices, edges and their
        payloads are all duplicated, so payloads and the vertex factory must
        be picklable. With ``pickle=False`` the copy shares the `Vertex`
        objects and payloads but gets its own `Edge` objects, with the same
        keys. ``as_view=True`` returns a read-only networkx view.

        Args:
            as_view: If True, return a networkx view instead of a copy.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            Graph: A new instance (or view) of the graph.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        if pickle:
            return loads(dumps(self))

        graph, _ = self.clone_with_vertices(share=True)
        for edge in self._edges.values():
            extra = {
                name: value
                for name, value in self._succ[edge.from_vertex][edge.to_vertex][edge.key].items()
                if name not in ("weight", "edge")
            }
            graph.add_edge(edge.from_vertex, edge.to_vertex, edge.data, key=edge.key, **extra)
        graph._next_edge_id = self._next_edge_id
        return graph

    def clone_with_vertices(
        self, vertices: Optional[Iterable[Vertex]] = None, share: bool = False
    ) -> Tuple[Graph, Dict[Vertex, Vertex]]:
        """Create an edgeless graph with the same settings and vertices.

        Args:
            vertices: Vertices to carry over, in order; all vertices when None.
            share: Reuse the `Vertex` objects instead of wrapping their
                payloads in new ones.

        Returns:
            The new graph and a map from each carried vertex to its
            counterpart in the new graph.
        """
        graph = self.__class__(
            vertex_factory=self.vertex_factory,
            allow_self_loops=self.allow_self_loops,
            allow_multiple_edges=self.allow_multiple_edges,
            **self.graph,
        )
        mapping: Dict[Vertex, Vertex] = {}
        for vertex in self._node if vertices is None else vertices:
            counterpart = vertex if share else Vertex(vertex.data)
            graph.add_node(counterpart, **self._node[vertex])
            mapping[vertex] = counterpart
        return graph, mapping

    #
    # Vertex management
    #
    def create_vertex(self, index: int) -> Vertex:
        """Build a payload with the graph's vertex factory and add it.

        Args:
            index: Index handed to the vertex factory.

        Returns:
            Vertex: The new vertex.

        Raises:
            ValueError: If the graph has no vertex factory.
            DuplicateVertexError: If the payload equals an existing one.
        """
        if self.vertex_factory is None:
            raise ValueError("Graph has no vertex factory; use add_vertex().")
        return self.add_vertex(self.vertex_factory(index))

    def add_vertex(self, data: Any = None) -> Vertex:
        """Wrap `data` in a new vertex and add it to the graph.

        Raises:
            DuplicateVertexError: If `data` equals an existing payload.
        """
        vertex = Vertex(data)
        self.add_node(vertex)
        return vertex

    def add_node(self, node_for_adding: Vertex, **attr: Any) -> None:
        """Add an existing vertex, disallowing duplicates.

        Args:
            node_for_adding: The vertex to add.
            **attr: Arbitrary networkx node attributes.

        Raises:
            TypeError: If the node is not a `Vertex`.
            ValueError: If the vertex is already in the graph.
            DuplicateVertexError: If its payload equals an existing payload.
        """
        if not isinstance(node_for_adding, Vertex):
            raise TypeError(
                f"Graph nodes must be Vertex instances, got {type(node_for_adding).__name__}."
            )
        if node_for_adding in self:
            raise ValueError(f"{node_for_adding!r} already exists in this graph.")
        data = node_for_adding.data
        if data is not None and self.get_vertex(data) is not None:
            raise DuplicateVertexError(
                f"A vertex with payload {data!r} already exists in this graph."
            )

        super().add_node(node_for_adding, **attr)
        self._emanating[node_for_adding] = []
        self._incoming[node_for_adding] = []
        if data is not None:
            try:
                self._payload_index[data] = node_for_adding
            except TypeError:
                self._unhashable_payloads.append(node_for_adding)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Add several vertices through `add_node`.

        Elements are vertices or networkx-style ``(vertex, attr_dict)`` pairs.
        """
        for item in nodes_for_adding:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                vertex, node_attr = item
                self.add_node(vertex, **{**attr, **node_attr})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: Vertex) -> None:
        """Remove a vertex and all incident edges.

        Raises:
            ValueError: If the vertex does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"{n!r} does not exist.")
        for edge in self._emanating[n] + self._incoming[n]:
            if edge.key in self._edges:
                self._forget_edge(edge)
        del self._emanating[n]
        del self._incoming[n]
        if n.data is not None:
            try:
                self._payload_index.pop(n.data, None)
            except TypeError:
                self._unhashable_payloads.remove(n)
        super().remove_node(n)

    def get_vertex(self, data: Any) -> Optional[Vertex]:
        """Return the vertex whose payload equals `data`, or None."""
        try:
            return self._payload_index.get(data)
        except TypeError:
            for vertex in self._unhashable_payloads:
                if vertex.data == data:
                    return vertex
            return None

    def contains_vertex_data(self, data: Any) -> bool:
        """Check whether a vertex with payload `data` exists."""
        return self.get_vertex(data) is not None

    def find_vertices(self, predicate: Callable[[Any], bool]) -> List[Vertex]:
        """Return the vertices whose payload satisfies `predicate`."""
        return [vertex for vertex in self._node if predicate(vertex.data)]

    def index_of_vertex(self, vertex: Vertex) -> int:
        """Return the insertion index of `vertex`, or -1 if absent."""
        for index, candidate in enumerate(self._node):
            if candidate is vertex:
                return index
        return -1

    def get_vertex_at(self, index: int) -> Vertex:
        """Return the vertex inserted at position `index`."""
        return self.vertices[index]

    @property
    def vertices(self) -> List[Vertex]:
        """All vertices in insertion order."""
        return list(self._node)

    @property
    def vertex_count(self) -> int:
        return len(self._node)

    #
    # Edge management
    #
    def add_edge(  # type: ignore[override]
        self,
        u_for_edge: Vertex,
        v_for_edge: Vertex,
        data: Any = None,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> Edge:
        """Add a directed edge from u_for_edge to v_for_edge.

        Both vertices must already be in the graph.

        Args:
            u_for_edge: The source vertex.
            v_for_edge: The target vertex.
            data: Optional weight payload (None, a number, or an object with
                a ``weight`` attribute).
            key: Optional unique edge key; generated when omitted.
            **attr: Extra networkx edge attributes.

        Returns:
            Edge: The new edge.

        Raises:
            ValueError: If a vertex is missing, the key is taken, or the edge
                would be a forbidden self loop or parallel edge.
            TypeError: If `data` carries no usable weight.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source vertex {u_for_edge!r} does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target vertex {v_for_edge!r} does not exist.")
        if u_for_edge is v_for_edge and not self.allow_self_loops:
            raise ValueError(f"Graph does not allow self loops ({u_for_edge!r}).")
        if not self.allow_multiple_edges and v_for_edge in self._succ[u_for_edge]:
            raise ValueError(
                f"An edge from {u_for_edge!r} to {v_for_edge!r} already exists."
            )
        weight = weight_of(data)

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            # Keep the counter ahead of explicit integer keys
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        edge = Edge(u_for_edge, v_for_edge, key, data)
        super().add_edge(u_for_edge, v_for_edge, key=key, weight=weight, edge=edge, **attr)
        self._edges[key] = edge
        self._emanating[u_for_edge].append(edge)
        self._incoming[v_for_edge].append(edge)
        return edge

    def add_edges_from(self, ebunch_to_add: Iterable[Tuple[Any, ...]], **attr: Any) -> List[Edge]:  # type: ignore[override]
        """Add several edges through `add_edge`.

        Elements are ``(u, v)`` or ``(u, v, data)``. The networkx forms
        ``(u, v, attr_dict)`` and ``(u, v, key, attr_dict)`` are accepted too,
        so networkx routines that rebuild a graph (such as `reverse`) keep
        working; the payload is then taken from the dict's ``edge`` entry, or
        its ``weight`` when there is none.

        Returns:
            The new edges, in input order.
        """
        edges = []
        for item in ebunch_to_add:
            u, v, *rest = item
            if rest and isinstance(rest[-1], dict):
                edge_attr = dict(rest[-1])
                key = rest[0] if len(rest) == 2 else None
                stored = edge_attr.pop("edge", None)
                weight = edge_attr.pop("weight", None)
                data = stored.data if isinstance(stored, Edge) else weight
                edges.append(self.add_edge(u, v, data, key=key, **{**attr, **edge_attr}))
            elif len(rest) <= 1:
                edges.append(self.add_edge(u, v, *rest, **attr))
            else:
                raise ValueError(f"Edge tuple {item!r} must be (u, v) or (u, v, data).")
        return edges

    def remove_edge(self, u: Vertex, v: Vertex, key: Optional[EdgeID] = None) -> None:
        """Remove the edge `key` from u to v, or all edges from u to v.

        Raises:
            ValueError: If no matching edge exists.
        """
        if key is not None:
            edge = self._edges.get(key)
            if edge is None or edge.from_vertex is not u or edge.to_vertex is not v:
                raise ValueError(f"No edge with id='{key}' found from {u!r} to {v!r}.")
            self.remove_edge_by_id(key)
            return
        if u not in self._succ or v not in self._succ[u]:
            raise ValueError(f"No edges from {u!r} to {v!r} to remove.")
        for e_id in tuple(self._succ[u][v]):
            self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove a directed edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        edge = self._edges.get(key)
        if edge is None:
            raise ValueError(f"Edge with id='{key}' not found.")
        self._forget_edge(edge)
        super().remove_edge(edge.from_vertex, edge.to_vertex, key=key)

    def _forget_edge(self, edge: Edge) -> None:
        del self._edges[edge.key]
        self._emanating[edge.from_vertex].remove(edge)
        self._incoming[edge.to_vertex].remove(edge)

    def emanating_edges(self, vertex: Vertex) -> List[Edge]:
        """Outgoing edges of `vertex` in insertion order.

        Raises:
            ValueError: If the vertex is not in the graph.
        """
        try:
            return list(self._emanating[vertex])
        except KeyError:
            raise ValueError(f"{vertex!r} does not exist.") from None

    def iter_emanating_edges(self, vertex: Vertex) -> Iterator[Edge]:
        """Iterate outgoing edges without copying; the graph must not change meanwhile."""
        return iter(self._emanating[vertex])

    def incoming_edges(self, vertex: Vertex) -> List[Edge]:
        """Incoming edges of `vertex` in insertion order.

        Raises:
            ValueError: If the vertex is not in the graph.
        """
        try:
            return list(self._incoming[vertex])
        except KeyError:
            raise ValueError(f"{vertex!r} does not exist.") from None

    def get_emanating_edge_to(self, u: Vertex, v: Vertex) -> Optional[Edge]:
        """Return the first edge inserted from u to v, or None."""
        for edge in self._emanating.get(u, ()):
            if edge.to_vertex is v:
                return edge
        return None

    def get_edge(self, key: EdgeID) -> Edge:
        """Return the edge with the given key.

        Raises:
            ValueError: If no edge with this key is found.
        """
        try:
            return self._edges[key]
        except KeyError:
            raise ValueError(f"Edge with id='{key}' not found.") from None

    def has_edge_by_id(self, key: EdgeID) -> bool:
        return key in self._edges

    @property
    def edge_list(self) -> List[Edge]:
        """All edges in insertion order."""
        return list(self._edges.values())

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    #
    # State
    #
    @property
    def contains_self_loops(self) -> bool:
        return nx.number_of_selfloops(self) > 0

    @property
    def contains_multiple_edges(self) -> bool:
        return any(
            len(keys) > 1 for nbrs in self._succ.values() for keys in nbrs.values()
        )

    @property
    def is_weakly_connected(self) -> bool:
        """Whether every vertex is reachable ignoring edge direction.

        Raises:
            ValueError: If the graph is empty.
        """
        self._require_vertices()
        return nx.is_weakly_connected(self)

    @property
    def is_strongly_connected(self) -> bool:
        """Whether every vertex reaches every other vertex.

        Raises:
            ValueError: If the graph is empty.
        """
        self._require_vertices()
        return nx.is_strongly_connected(self)

    @property
    def is_cyclic(self) -> bool:
        return not nx.is_directed_acyclic_graph(self)

    def topological_sort(self) -> List[Vertex]:
        """Return the vertices in a topological order.

        Raises:
            ValueError: If the graph has cycles.
        """
        try:
            return list(nx.topological_sort(self))
        except nx.NetworkXUnfeasible as exc:
            raise ValueError("Graph has cycles; no topological order exists.") from exc

    def _require_vertices(self) -> None:
        if not self._node:
            raise ValueError("Graph is empty.")
