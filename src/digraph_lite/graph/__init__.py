"""Mutable directed graph container and its building blocks."""

from digraph_lite.graph.adjacency import DualAdjacency
from digraph_lite.graph.errors import InvariantViolation
from digraph_lite.graph.mutable import MutableDirectedGraph
from digraph_lite.graph.registry import NodeRegistry

__all__ = [
    "DualAdjacency",
    "InvariantViolation",
    "MutableDirectedGraph",
    "NodeRegistry",
]
