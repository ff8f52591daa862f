"""digraph-lite: a mutable directed graph with dual adjacency indices."""

from digraph_lite.domain import INFINITE_COST, Edge, Node, NodeId, WeightedEdge
from digraph_lite.graph import InvariantViolation, MutableDirectedGraph

__all__ = [
    "Edge",
    "INFINITE_COST",
    "InvariantViolation",
    "MutableDirectedGraph",
    "Node",
    "NodeId",
    "WeightedEdge",
]
