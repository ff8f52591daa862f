"""Shared fixtures for graph container tests."""
from __future__ import annotations

import pytest

from digraph_lite.domain.elements import Edge
from digraph_lite.graph.mutable import MutableDirectedGraph


@pytest.fixture
def empty_graph() -> MutableDirectedGraph[str]:
    return MutableDirectedGraph()


@pytest.fixture
def linear_graph() -> MutableDirectedGraph[str]:
    """0 -> 1 -> 2 -> 3, costs 1, 2, 3"""
    g: MutableDirectedGraph[str] = MutableDirectedGraph()
    for head, tail, cost in [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0)]:
        g.insert_edge(Edge(head, tail, f"{head}-{tail}"), cost)
    return g


@pytest.fixture
def diamond_graph() -> MutableDirectedGraph[str]:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    g: MutableDirectedGraph[str] = MutableDirectedGraph()
    for head, tail in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        g.insert_edge(Edge(head, tail), 1.0)
    return g


@pytest.fixture
def reciprocal_graph() -> MutableDirectedGraph[str]:
    """0 <-> 1 (both directions, cost 5) and 1 -> 2 (cost 7)."""
    g: MutableDirectedGraph[str] = MutableDirectedGraph()
    g.insert_edge(Edge(0, 1, "fwd"), 5.0)
    g.insert_edge(Edge(1, 0, "back"), 5.0)
    g.insert_edge(Edge(1, 2, "out"), 7.0)
    return g
