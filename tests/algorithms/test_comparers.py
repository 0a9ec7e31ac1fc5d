from pathgraph import Graph, WeightData
from pathgraph.algorithms.comparers import (
    EDGE_WEIGHT_COMPARER,
    EdgeWeightComparer,
    sorted_by_weight,
)


def _edges():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    no_payload = g.add_edge(a, b)
    heavy = g.add_edge(a, b, WeightData(5))
    light = g.add_edge(a, b, WeightData(1.5))
    tied = g.add_edge(a, b, 0)
    return no_payload, heavy, light, tied


def test_singleton():
    assert EdgeWeightComparer() is EdgeWeightComparer.instance
    assert EDGE_WEIGHT_COMPARER is EdgeWeightComparer.instance


def test_missing_payload_weighs_zero():
    no_payload, heavy, _, tied = _edges()
    assert EDGE_WEIGHT_COMPARER.compare(no_payload, heavy) < 0
    assert EDGE_WEIGHT_COMPARER.compare(heavy, no_payload) > 0
    assert EDGE_WEIGHT_COMPARER.compare(no_payload, tied) == 0


def test_total_order_properties():
    edges = _edges()
    compare = EDGE_WEIGHT_COMPARER.compare
    for x in edges:
        assert compare(x, x) == 0
        for y in edges:
            assert compare(x, y) == -compare(y, x)


def test_sorted_by_weight_is_stable():
    no_payload, heavy, light, tied = _edges()
    assert sorted_by_weight([heavy, no_payload, light, tied]) == [
        no_payload,
        tied,
        light,
        heavy,
    ]
    assert sorted([heavy, light], key=EDGE_WEIGHT_COMPARER.key) == [light, heavy]
