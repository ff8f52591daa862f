"""Randomized operation sequences: the indices must stay consistent.

After every mutation the forward and reverse maps are checked against
each other and against an independently maintained model of the edge
set (a plain dict of (head, tail) -> cost).
"""
from __future__ import annotations

import math
import random

import pytest

from digraph_lite.domain.elements import Edge
from digraph_lite.graph.mutable import MutableDirectedGraph

SEED = 42
N_IDS = 12
N_STEPS = 400


def _apply_random_op(
    rng: random.Random,
    g: MutableDirectedGraph[int],
    model_nodes: set[int],
    model_edges: dict[tuple[int, int], float],
) -> None:
    op = rng.random()
    a, b = rng.randrange(N_IDS), rng.randrange(N_IDS)
    if op < 0.15:
        g.insert_node(a)
        model_nodes.add(a)
    elif op < 0.60:
        cost = float(rng.randint(1, 5))
        g.insert_edge(Edge(a, b, rng.randrange(100)), cost)
        model_nodes.update((a, b))
        model_edges[(a, b)] = cost
    elif op < 0.80:
        g.remove_edge(Edge(a, b))
        model_edges.pop((a, b), None)
    elif op < 0.97:
        g.remove_node(a)
        model_nodes.discard(a)
        for key in [k for k in model_edges if a in k]:
            del model_edges[key]
    else:
        g.reset()
        model_nodes.clear()
        model_edges.clear()


@pytest.mark.parametrize("seed", [SEED, SEED + 1, SEED + 2])
def test_random_operations_preserve_invariants(seed: int) -> None:
    rng = random.Random(seed)
    g: MutableDirectedGraph[int] = MutableDirectedGraph()
    model_nodes: set[int] = set()
    model_edges: dict[tuple[int, int], float] = {}

    for _ in range(N_STEPS):
        _apply_random_op(rng, g, model_nodes, model_edges)
        g.check_invariants()

        assert {n.id for n in g.node_list()} == model_nodes
        assert g.edge_count == len(model_edges)
        for h in range(N_IDS):
            for t in range(N_IDS):
                expected = model_edges.get((h, t), math.inf)
                assert g.cost(Edge(h, t)) == expected
                assert (g.edge_to(h, t) is not None) == ((h, t) in model_edges)


@pytest.mark.parametrize("seed", [SEED, SEED + 7])
def test_edge_list_matches_undirected_model(seed: int) -> None:
    rng = random.Random(seed)
    g: MutableDirectedGraph[int] = MutableDirectedGraph()
    directed: set[tuple[int, int]] = set()
    for _ in range(150):
        a, b = rng.randrange(N_IDS), rng.randrange(N_IDS)
        g.insert_edge(Edge(a, b), 1.0)
        directed.add((a, b))

    edges = g.edge_list()
    undirected = {frozenset(pair) for pair in directed}
    emitted = [frozenset((e.head.id, e.tail.id)) for e in edges]
    assert len(emitted) == len(set(emitted))
    assert set(emitted) == undirected


def test_allocation_fills_gaps_before_growing() -> None:
    rng = random.Random(SEED)
    g: MutableDirectedGraph[int] = MutableDirectedGraph()
    for _ in range(20):
        g.new_node()
    removed = sorted(rng.sample(range(20), 6))
    for nid in removed:
        g.remove_node(nid)

    refilled = [g.new_node().id for _ in range(6)]
    assert refilled == removed
    assert g.new_node().id == 20
