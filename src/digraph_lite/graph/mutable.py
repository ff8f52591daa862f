"""Mutable directed graph: the public mutation and query protocol.

MutableDirectedGraph composes a NodeRegistry (which nodes exist, which
id comes next) with a DualAdjacency (who connects to whom, at what
cost).  Every mutation updates both before returning, so between calls
the three maps always share one key set and every forward entry has a
matching reverse entry.

Absence is never an error here.  Removing a node or edge that isn't
there does nothing; querying an unknown node gives an empty list, None,
0 or, for cost(), infinity.  The graph is not thread-safe: callers that
share one across threads must serialise mutations themselves.

Usage:

    g = MutableDirectedGraph()
    a, b = g.new_node(), g.new_node()
    g.insert_edge(Edge(a, b, "road"), 5.0)
    g.cost(Edge(a, b))      # 5.0
    g.cost(Edge(b, a))      # inf
    g.edge_between(b, a)    # the a -> b edge
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar

from digraph_lite.domain.elements import Edge, Node, WeightedEdge, as_node, node_id
from digraph_lite.domain.types import INFINITE_COST, Cost, NodeId
from digraph_lite.graph.adjacency import DualAdjacency
from digraph_lite.graph.registry import NodeRegistry

P = TypeVar("P")

log = logging.getLogger(__name__)


class MutableDirectedGraph(Generic[P]):
    """Directed graph with weighted edges and O(1) adjacency both ways.

    Args:
        nodes: optional nodes (or bare ids) to insert up front
        edges: optional (edge, cost) pairs to insert up front
    """

    __slots__ = ("_registry", "_adj")

    def __init__(
        self,
        nodes: Iterable[Node | NodeId] | None = None,
        edges: Iterable[tuple[Edge[P], Cost]] | None = None,
    ) -> None:
        self._registry = NodeRegistry()
        self._adj: DualAdjacency[P] = DualAdjacency()
        for n in nodes or ():
            self.insert_node(n)
        for edge, cost in edges or ():
            self.insert_edge(edge, cost)

    # ---- mutation --------------------------------------------------------

    def allocate(self) -> NodeId:
        """Smallest id not in use.  Does not insert anything."""
        return self._registry.allocate()

    def new_node(self, payload: Any = None) -> Node:
        """Insert and return a node under a freshly allocated id."""
        node = Node(self._registry.allocate(), payload)
        self.insert_node(node)
        return node

    def insert_node(self, n: Node | NodeId) -> None:
        """Add *n* if its id is not already present.

        Re-inserting an existing id is a no-op; the stored node and its
        payload are kept.
        """
        node = as_node(n)
        if self._registry.register(node):
            self._adj.add_vertex(node.id)

    def insert_edge(self, edge: Edge[P] | WeightedEdge[P], cost: Cost) -> WeightedEdge[P]:
        """Store *edge* with *cost*, creating missing endpoints.

        Only one edge is kept per ordered (head, tail) pair: inserting
        again replaces the previous edge, payload and cost included.
        A WeightedEdge is unwrapped first; *cost* wins over its own.
        """
        if isinstance(edge, WeightedEdge):
            edge = edge.edge
        weighted = WeightedEdge(edge, cost)
        self.insert_node(edge.head)
        self.insert_node(edge.tail)
        self._adj.link(edge.head.id, edge.tail.id, weighted)
        return weighted

    def remove_node(self, n: Node | NodeId) -> None:
        """Remove *n* together with every edge into or out of it."""
        nid = node_id(n)
        if nid not in self._registry:
            return
        removed = self._adj.drop_vertex(nid)
        self._registry.unregister(nid)
        log.debug("removed node %d and %d incident edge(s)", nid, removed)

    def remove_edge(self, edge: Edge[P] | WeightedEdge[P]) -> None:
        """Remove the head -> tail edge.

        Matching is by endpoint ids only; the payload is ignored.
        Nothing happens unless both endpoints exist.
        """
        head, tail = edge.head.id, edge.tail.id
        if head not in self._registry or tail not in self._registry:
            return
        self._adj.unlink(head, tail)

    def reset(self) -> None:
        """Discard every node and edge."""
        log.debug(
            "resetting graph (%d nodes, %d edges)",
            len(self._registry), self._adj.edge_count,
        )
        self._registry.clear()
        self._adj.clear()

    # ---- queries ---------------------------------------------------------

    def has_node(self, n: Node | NodeId) -> bool:
        return node_id(n) in self._registry

    def has_edge(self, n: Node | NodeId, m: Node | NodeId) -> bool:
        return self.edge_to(n, m) is not None

    def node(self, nid: NodeId) -> Node | None:
        """The stored node for *nid* (with its payload), or None."""
        return self._registry.get(nid)

    def successors(self, n: Node | NodeId) -> list[Node]:
        """Nodes reachable over one outgoing edge."""
        return [self._registry[s] for s in self._adj.successor_ids(node_id(n))]

    def predecessors(self, n: Node | NodeId) -> list[Node]:
        """Nodes with an edge into *n*."""
        return [self._registry[p] for p in self._adj.predecessor_ids(node_id(n))]

    def neighbors(self, n: Node | NodeId) -> list[Node]:
        """Every node adjacent to *n* in either direction, once each."""
        nid = node_id(n)
        result = self.successors(nid)
        for pred in self._adj.predecessor_ids(nid):
            # already listed if the edge also runs the other way
            if not self._adj.is_successor(nid, pred):
                result.append(self._registry[pred])
        return result

    def edge_to(self, n: Node | NodeId, m: Node | NodeId) -> WeightedEdge[P] | None:
        """The directed edge n -> m, or None."""
        head, tail = node_id(n), node_id(m)
        if head not in self._registry or tail not in self._registry:
            return None
        return self._adj.get(head, tail)

    def edge_between(self, n: Node | NodeId, m: Node | NodeId) -> WeightedEdge[P] | None:
        """An edge joining n and m in either direction, n -> m first."""
        edge = self.edge_to(n, m)
        if edge is not None:
            return edge
        return self.edge_to(m, n)

    def degree(self, n: Node | NodeId) -> int:
        """Outgoing plus incoming edge count.

        A reciprocal pair with the same neighbour counts twice.
        """
        nid = node_id(n)
        return self._adj.out_degree(nid) + self._adj.in_degree(nid)

    def in_degree(self, n: Node | NodeId) -> int:
        return self._adj.in_degree(node_id(n))

    def out_degree(self, n: Node | NodeId) -> int:
        return self._adj.out_degree(node_id(n))

    def cost(self, edge: Edge[P] | WeightedEdge[P]) -> Cost:
        """Stored cost of head -> tail, or infinity if there is no such edge."""
        stored = self._adj.get(edge.head.id, edge.tail.id)
        if stored is None:
            return INFINITE_COST
        return stored.cost

    def node_list(self) -> list[Node]:
        """Snapshot of all live nodes, in no particular order."""
        return self._registry.nodes()

    def edge_list(self) -> list[WeightedEdge[P]]:
        """Snapshot of all edges, with each reciprocal pair listed once."""
        return self._adj.unique_edges()

    def check_invariants(self) -> None:
        """Raise InvariantViolation if the internal maps disagree."""
        self._adj.check(self._registry.ids())

    @property
    def node_count(self) -> int:
        return len(self._registry)

    @property
    def edge_count(self) -> int:
        """Directed edges stored; a reciprocal pair counts as two."""
        return self._adj.edge_count

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, n: object) -> bool:
        return n in self._registry

    def __len__(self) -> int:
        return self.node_count

    def __iter__(self) -> Iterator[Node]:
        return iter(self.node_list())

    def __repr__(self) -> str:
        return f"MutableDirectedGraph(nodes={self.node_count}, edges={self.edge_count})"
