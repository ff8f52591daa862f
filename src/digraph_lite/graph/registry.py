"""Node identity registry: the authoritative set of live nodes.

The registry maps NodeId -> Node and hands out fresh ids.  Allocation
always recycles the smallest free non-negative id before growing the id
space:

    live ids [0, 1, 2]  -> allocate() == 3
    live ids [0, 2, 3]  -> allocate() == 1
    live ids []         -> allocate() == 0

The counter is plain instance state, so two graphs never share or leak
id space.  allocate() only computes an id; callers still register it.
"""
from __future__ import annotations

import logging
from typing import Iterator

from digraph_lite.domain.elements import Node
from digraph_lite.domain.types import NodeId

log = logging.getLogger(__name__)


class NodeRegistry:
    """Live nodes keyed by id, plus gap-recycling id allocation."""

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[NodeId, Node] = {}

    def allocate(self) -> NodeId:
        """Return the smallest non-negative id not currently live.

        Sorts the live ids and scans by position: the first slot i whose
        id is not i is a gap.  With no gap the ids form the contiguous
        prefix 0..n-1 and n is next.
        """
        for i, nid in enumerate(sorted(self._nodes)):
            if nid != i:
                log.debug("recycling node id %d", i)
                return i
        return len(self._nodes)

    def register(self, node: Node) -> bool:
        """Add *node* unless its id is already live.  True if added."""
        if node.id in self._nodes:
            return False
        self._nodes[node.id] = node
        return True

    def unregister(self, nid: NodeId) -> Node | None:
        return self._nodes.pop(nid, None)

    def get(self, nid: NodeId) -> Node | None:
        return self._nodes.get(nid)

    def __getitem__(self, nid: NodeId) -> Node:
        return self._nodes[nid]

    def ids(self) -> list[NodeId]:
        return list(self._nodes)

    def nodes(self) -> list[Node]:
        """Snapshot of every live node."""
        return list(self._nodes.values())

    def clear(self) -> None:
        self._nodes = {}

    def __contains__(self, n: object) -> bool:
        if isinstance(n, Node):
            return n.id in self._nodes
        return n in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return f"NodeRegistry(nodes={len(self._nodes)})"
