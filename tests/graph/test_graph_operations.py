import pytest

from pathgraph import Graph, WeightData
from pathgraph.graph.operations import contract, cut, edge_complement


def links(graph):
    return sorted(
        (edge.from_vertex.data, edge.to_vertex.data, edge.weight) for edge in graph.edge_list
    )


def test_edge_complement():
    g = Graph()
    a, b, c, d = (g.add_vertex(name) for name in "ABCD")
    g.add_edge(a, b)
    g.add_edge(b, c)

    complement = edge_complement(g)
    pairs = sorted((e.from_vertex.data, e.to_vertex.data) for e in complement.edge_list)
    assert pairs == [
        ("A", "C"), ("A", "D"),
        ("B", "D"),
        ("C", "A"), ("C", "D"),
        ("D", "A"), ("D", "B"), ("D", "C"),
    ]
    assert [v.data for v in complement.vertices] == ["A", "B", "C", "D"]
    assert all(v not in g for v in complement.vertices)
    assert g.edge_count == 2


def test_cut_joins_former_neighbours():
    g = Graph()
    a, b, c, x = (g.add_vertex(name) for name in "ABCX")
    g.add_edge(a, x)
    g.add_edge(x, b)
    g.add_edge(x, c)
    g.add_edge(c, x)
    g.add_edge(b, c, WeightData(9))

    added = cut(g, x)

    assert x not in g
    assert [(e.from_vertex.data, e.to_vertex.data) for e in added] == [
        ("B", "A"), ("C", "B"), ("C", "A"), ("A", "B"), ("A", "C"),
    ]
    assert g.edge_count == 6
    # The existing B -> C edge is kept as is
    assert g.get_emanating_edge_to(b, c).weight == 9


def test_cut_unknown_vertex():
    g = Graph()
    other = Graph().add_vertex("A")
    with pytest.raises(ValueError, match="does not exist"):
        cut(g, other)


@pytest.fixture
def contractible():
    g = Graph()
    v = {name: g.add_vertex(name) for name in "ABCD"}
    edge = g.add_edge(v["A"], v["B"], 1)
    g.add_edge(v["B"], v["A"], 2)
    g.add_edge(v["A"], v["C"], 3)
    g.add_edge(v["D"], v["A"], 4)
    g.add_edge(v["A"], v["D"], 5)
    g.add_edge(v["B"], v["C"], 6)
    return g, v, edge


def test_contract_merges_source_into_target(contractible):
    g, v, edge = contractible
    kept = contract(g, edge)

    assert kept is v["B"]
    assert v["A"] not in g
    assert links(g) == [("B", "C", 6.0), ("B", "D", 5.0), ("D", "B", 4.0)]


def test_contract_can_keep_parallel_edges(contractible):
    g, v, edge = contractible
    contract(g, edge, discard_extra_adjacent_edges=False)
    assert links(g) == [
        ("B", "C", 3.0),
        ("B", "C", 6.0),
        ("B", "D", 5.0),
        ("D", "B", 4.0),
    ]


def test_contract_foreign_edge(contractible):
    g, _, _ = contractible
    other = Graph()
    p, q = other.add_vertex("P"), other.add_vertex("Q")
    with pytest.raises(ValueError, match="not part of the graph"):
        contract(g, other.add_edge(p, q))
