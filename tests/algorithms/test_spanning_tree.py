import pytest

from pathgraph import Graph, Vertex, WeightData
from pathgraph.algorithms.spanning_tree import kruskal, prim
from pathgraph.graph import create_grid


@pytest.fixture
def weighted():
    # Undirected view (weights):
    #   A -4- B -1- C,  C -2- A,  D -3- B,  C -5- D,  A -10- D,  D loop 0
    #   E isolated
    g = Graph(allow_self_loops=True)
    v = {name: g.add_vertex(name) for name in "ABCDE"}
    g.add_edge(v["A"], v["B"], WeightData(4))
    g.add_edge(v["B"], v["C"], WeightData(1))
    g.add_edge(v["C"], v["A"], WeightData(2))
    g.add_edge(v["D"], v["B"], WeightData(3))
    g.add_edge(v["C"], v["D"], WeightData(5))
    g.add_edge(v["A"], v["D"], WeightData(10))
    g.add_edge(v["D"], v["D"], WeightData(0))
    return g, v


def summary(tree):
    return sorted(
        (edge.from_vertex.data, edge.to_vertex.data, edge.weight) for edge in tree.edge_list
    )


EXPECTED = [("B", "C", 1.0), ("C", "A", 2.0), ("D", "B", 3.0)]


def test_kruskal(weighted):
    g, v = weighted
    tree = kruskal(g)
    assert summary(tree) == EXPECTED
    assert [vertex.data for vertex in tree.vertices] == ["A", "B", "C", "D", "E"]
    assert all(vertex not in g for vertex in tree.vertices)
    assert tree.allow_self_loops
    # Input untouched
    assert g.edge_count == 7


def test_prim_spans_component_of_start(weighted):
    g, v = weighted
    tree = prim(g, v["D"])
    assert summary(tree) == EXPECTED
    assert tree.vertex_count == 5

    lonely = prim(g, v["E"])
    assert lonely.vertex_count == 5
    assert lonely.edge_count == 0


def test_lightest_parallel_edge_chosen():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    g.add_edge(a, b, WeightData(5))
    g.add_edge(a, b, WeightData(2))
    g.add_edge(b, a, WeightData(3))
    assert summary(kruskal(g)) == [("A", "B", 2.0)]
    assert summary(prim(g, b)) == [("A", "B", 2.0)]


def test_prim_and_kruskal_agree_on_grid():
    g = create_grid(
        5, 4, lambda i: f"v{i}", lambda a, b: WeightData((a * 7 + b * 3) % 11)
    )
    by_kruskal = kruskal(g)
    by_prim = prim(g, g.get_vertex("v0"))
    assert by_kruskal.edge_count == by_prim.edge_count == g.vertex_count - 1
    assert sum(e.weight for e in by_kruskal.edge_list) == sum(
        e.weight for e in by_prim.edge_list
    )
    assert by_kruskal.is_weakly_connected


def test_empty_graph():
    assert kruskal(Graph()).vertex_count == 0


def test_invalid_arguments(weighted):
    g, _ = weighted
    with pytest.raises(ValueError, match="not in the graph"):
        prim(g, Vertex("A"))
    with pytest.raises(ValueError):
        prim(g, None)
    with pytest.raises(ValueError):
        kruskal(None)
