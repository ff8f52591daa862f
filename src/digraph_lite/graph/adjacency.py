"""Dual adjacency index: forward and reverse edge maps kept in lockstep.

Both maps are dict[NodeId, dict[NodeId, WeightedEdge]]:

    forward[head][tail] -> edge head -> tail  (successors)
    reverse[tail][head] -> the same edge      (predecessors)

Every write goes to both sides with the *same* WeightedEdge object, so
"forward[h][t] is reverse[t][h]" holds for every stored pair.  Storing
successors and predecessors separately costs twice the memory of a
single adjacency map, in exchange for O(1) predecessor lookups instead
of a scan over every node.

Edges are values looked up by id pairs; no node object ever refers to
another, so removing a vertex can't leave a dangling reference behind.
"""
from __future__ import annotations

from typing import Collection, Generic, TypeVar

from digraph_lite.domain.elements import WeightedEdge
from digraph_lite.domain.types import NodeId
from digraph_lite.graph.errors import InvariantViolation

P = TypeVar("P")


class DualAdjacency(Generic[P]):
    """Forward (successor) and reverse (predecessor) adjacency maps."""

    __slots__ = ("_fwd", "_rev")

    def __init__(self) -> None:
        self._fwd: dict[NodeId, dict[NodeId, WeightedEdge[P]]] = {}
        self._rev: dict[NodeId, dict[NodeId, WeightedEdge[P]]] = {}

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, nid: NodeId) -> None:
        """Create empty adjacency entries for *nid* if it has none."""
        if nid not in self._fwd:
            self._fwd[nid] = {}
            self._rev[nid] = {}

    def drop_vertex(self, nid: NodeId) -> int:
        """Remove *nid* and every edge touching it, in both directions.

        Returns the number of edges removed.  A self-loop is counted
        once.  Unknown ids remove nothing.
        """
        if not self.has_vertex(nid):
            return 0
        succs = self._fwd.pop(nid)
        preds = self._rev.pop(nid)
        for succ in succs:
            if succ != nid:
                del self._rev[succ][nid]
        for pred in preds:
            if pred != nid:
                del self._fwd[pred][nid]
        return len(succs) + len(preds) - (1 if nid in succs else 0)

    def link(self, head: NodeId, tail: NodeId, edge: WeightedEdge[P]) -> None:
        """Store *edge* as head -> tail, replacing any previous edge.

        Both endpoints must already be vertices.
        """
        self._fwd[head][tail] = edge
        self._rev[tail][head] = edge

    def unlink(self, head: NodeId, tail: NodeId) -> bool:
        """Delete the head -> tail edge.  False if there was none."""
        succs = self._fwd.get(head)
        if succs is None or tail not in succs:
            return False
        del succs[tail]
        del self._rev[tail][head]
        return True

    def clear(self) -> None:
        self._fwd = {}
        self._rev = {}

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, nid: NodeId) -> bool:
        return nid in self._fwd

    def get(self, head: NodeId, tail: NodeId) -> WeightedEdge[P] | None:
        succs = self._fwd.get(head)
        if succs is None:
            return None
        return succs.get(tail)

    def successor_ids(self, nid: NodeId) -> list[NodeId]:
        return list(self._fwd.get(nid, ()))

    def predecessor_ids(self, nid: NodeId) -> list[NodeId]:
        return list(self._rev.get(nid, ()))

    def is_successor(self, nid: NodeId, other: NodeId) -> bool:
        return other in self._fwd.get(nid, ())

    def out_degree(self, nid: NodeId) -> int:
        return len(self._fwd.get(nid, ()))

    def in_degree(self, nid: NodeId) -> int:
        return len(self._rev.get(nid, ()))

    def unique_edges(self) -> list[WeightedEdge[P]]:
        """Every stored edge once, collapsing reciprocal pairs.

        When both h -> t and t -> h are stored they describe one
        undirected connection and only the first one met is emitted.
        done[n] records the tails already emitted while scanning n; on
        reaching t -> h we skip it if done[h] already holds t.

        Every done set is created before any adjacency is scanned.  If
        they were created lazily, done[t] could be missing when h is
        scanned first and the reciprocal check would depend on dict
        iteration order.
        """
        done: dict[NodeId, set[NodeId]] = {nid: set() for nid in self._fwd}
        result: list[WeightedEdge[P]] = []
        for nid, succs in self._fwd.items():
            for succ, edge in succs.items():
                if nid in done[succ]:
                    continue
                result.append(edge)
                done[nid].add(succ)
        return result

    @property
    def vertex_count(self) -> int:
        return len(self._fwd)

    @property
    def edge_count(self) -> int:
        return sum(len(succs) for succs in self._fwd.values())

    # ---- consistency -----------------------------------------------------

    def check(self, node_ids: Collection[NodeId]) -> None:
        """Verify both maps agree with each other and with *node_ids*.

        Raises InvariantViolation describing the first problem found.
        """
        keys = set(node_ids)
        if set(self._fwd) != keys or set(self._rev) != keys:
            raise InvariantViolation(
                "key-sets",
                f"nodes={sorted(keys)} forward={sorted(self._fwd)} "
                f"reverse={sorted(self._rev)}",
            )
        for head, succs in self._fwd.items():
            for tail, edge in succs.items():
                if tail not in keys:
                    raise InvariantViolation(
                        "dangling", f"forward[{head}] references unknown node {tail}"
                    )
                if self._rev[tail].get(head) is not edge:
                    raise InvariantViolation(
                        "symmetry", f"forward[{head}][{tail}] has no matching reverse entry"
                    )
                if edge.head.id != head or edge.tail.id != tail:
                    raise InvariantViolation(
                        "endpoints", f"edge stored at [{head}][{tail}] is {edge.head.id}->{edge.tail.id}"
                    )
        for tail, preds in self._rev.items():
            for head, edge in preds.items():
                if head not in keys:
                    raise InvariantViolation(
                        "dangling", f"reverse[{tail}] references unknown node {head}"
                    )
                if self._fwd[head].get(tail) is not edge:
                    raise InvariantViolation(
                        "symmetry", f"reverse[{tail}][{head}] has no matching forward entry"
                    )

    def __repr__(self) -> str:
        return f"DualAdjacency(vertices={self.vertex_count}, edges={self.edge_count})"
