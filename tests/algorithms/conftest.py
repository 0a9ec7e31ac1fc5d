"""Sample graphs shared by the algorithm tests.

Each fixture returns ``(graph, vertices)`` where ``vertices`` maps a name to
its `Vertex`.
"""

import pytest

from pathgraph import Graph, Position, WeightData


@pytest.fixture
def abc_graph():
    # Weights:
    #       [2]      [3]
    #   A ──────► B ──────► C        D (isolated)
    #   │                   ▲
    #   └───────────────────┘
    #           [10]
    g = Graph()
    v = {name: g.add_vertex(name) for name in "ABCD"}
    g.add_edge(v["A"], v["B"], WeightData(2))
    g.add_edge(v["B"], v["C"], WeightData(3))
    g.add_edge(v["A"], v["C"], WeightData(10))
    return g, v


@pytest.fixture
def decoy_triangle():
    # Positions and weights:
    #
    #   M (0, 20)
    #   │ ╲
    #  [1] ╲ [1]
    #   │    ╲
    #   S ────► T
    # (0, 0) [100] (10, 0)
    #
    # T looks closest from S, but the detour through M is far lighter.
    g = Graph()
    v = {
        "S": g.add_vertex(Position(0, 0, "S")),
        "T": g.add_vertex(Position(10, 0, "T")),
        "M": g.add_vertex(Position(0, 20, "M")),
    }
    g.add_edge(v["S"], v["T"], WeightData(100))
    g.add_edge(v["S"], v["M"], WeightData(1))
    g.add_edge(v["M"], v["T"], WeightData(1))
    return g, v


@pytest.fixture
def parallel_edges():
    # Three parallel A->B edges (weights 5, 1, 3) followed by B->C [1].
    g = Graph()
    v = {name: g.add_vertex(name) for name in "ABC"}
    g.add_edge(v["A"], v["B"], WeightData(5))
    g.add_edge(v["A"], v["B"], WeightData(1))
    g.add_edge(v["A"], v["B"], WeightData(3))
    g.add_edge(v["B"], v["C"], 1)
    return g, v


@pytest.fixture
def zero_weight_cycle():
    # A -> B -> C -> A with payload-less (weight 0) edges and C -> D [4].
    g = Graph()
    v = {name: g.add_vertex(name) for name in "ABCD"}
    g.add_edge(v["A"], v["B"])
    g.add_edge(v["B"], v["C"])
    g.add_edge(v["C"], v["A"])
    g.add_edge(v["C"], v["D"], WeightData(4))
    return g, v
