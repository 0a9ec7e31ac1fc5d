"""Graph primitives and generators.

This package provides the weighted directed graph type `Graph` with its
`Vertex`/`Edge` records (`model`), index-driven generators (`factory`) and
structural operations (`operations`).
"""

from pathgraph.graph.factory import (
    create_circle,
    create_complete,
    create_grid,
    create_path,
    create_star,
)
from pathgraph.graph.model import Edge, EdgeID, Graph, Vertex, WeightData, weight_of
from pathgraph.graph.operations import contract, cut, edge_complement

__all__ = [
    "Edge",
    "EdgeID",
    "Graph",
    "Vertex",
    "WeightData",
    "weight_of",
    "contract",
    "create_circle",
    "create_complete",
    "create_grid",
    "create_path",
    "create_star",
    "cut",
    "edge_complement",
]
