import pytest

from pathgraph import Graph, Vertex
from pathgraph.algorithms.traversal import (
    breadth_first,
    breadth_first_edges,
    depth_first,
    depth_first_edges,
)


@pytest.fixture
def diamond():
    #   A ──► B ──► D ──► A (back edge)
    #   └───► C ──► D          E (isolated)
    # A -> B is doubled; the first copy is the tree edge.
    g = Graph()
    v = {name: g.add_vertex(name) for name in "ABCDE"}
    edges = {
        "AB": g.add_edge(v["A"], v["B"], 1),
        "AC": g.add_edge(v["A"], v["C"], 1),
        "AB2": g.add_edge(v["A"], v["B"], 7),
        "BD": g.add_edge(v["B"], v["D"], 1),
        "CD": g.add_edge(v["C"], v["D"], 1),
        "DA": g.add_edge(v["D"], v["A"], 1),
    }
    return g, v, edges


def names(vertices):
    return [vertex.data for vertex in vertices]


def test_depth_first_orders(diamond):
    g, v, _ = diamond
    assert names(depth_first(g, v["A"])) == ["A", "B", "D", "C"]
    assert names(depth_first(g, v["A"], postorder=True)) == ["D", "B", "C", "A"]


def test_breadth_first_order(diamond):
    g, v, _ = diamond
    assert names(breadth_first(g, v["A"])) == ["A", "B", "C", "D"]


def test_traversals_follow_edge_direction(diamond):
    g, v, _ = diamond
    assert names(breadth_first(g, v["C"])) == ["C", "D", "A", "B"]
    assert names(depth_first(g, v["E"])) == ["E"]
    assert names(breadth_first(g, v["E"])) == ["E"]


def test_tree_edges(diamond):
    g, v, e = diamond
    assert list(depth_first_edges(g, v["A"])) == [e["AB"], e["BD"], e["AC"]]
    assert list(breadth_first_edges(g, v["A"])) == [e["AB"], e["AC"], e["BD"]]
    assert list(depth_first_edges(g, v["E"])) == []


def test_traversal_can_stop_early(diamond):
    g, v, _ = diamond
    visited = []
    for vertex in breadth_first(g, v["A"]):
        visited.append(vertex.data)
        if vertex.data == "B":
            break
    assert visited == ["A", "B"]


@pytest.mark.parametrize(
    "traverse", [depth_first, breadth_first, depth_first_edges, breadth_first_edges]
)
def test_invalid_start_rejected_on_call(diamond, traverse):
    g, _, _ = diamond
    with pytest.raises(ValueError, match="not in the graph"):
        traverse(g, Vertex("A"))
    with pytest.raises(ValueError):
        traverse(g, None)
