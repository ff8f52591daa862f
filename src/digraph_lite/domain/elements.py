"""Graph element value types: Node, Edge and WeightedEdge.

Nodes are identified solely by a non-negative integer.  They may carry
an arbitrary payload, but the payload takes no part in equality or
hashing, so ``Node(3, "a") == Node(3, "b")``.

Edges hold their endpoints by value.  Nothing in the graph ever points
from one Node object to another; the containers look edges up by id
pairs, which keeps removal free of dangling references.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from digraph_lite.domain.types import Cost, NodeId

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class Node:
    """A graph vertex. Identity is the integer ``id`` alone."""
    id: NodeId
    payload: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # bool is an int subclass; True/False as ids is always a mistake
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"Node id must be an int, got {type(self.id).__name__}")
        if self.id < 0:
            raise ValueError(f"Node id must be non-negative, got {self.id}")


def as_node(n: Node | NodeId) -> Node:
    """Normalise a Node-or-id argument to a Node."""
    if isinstance(n, Node):
        return n
    return Node(n)


def node_id(n: Node | NodeId) -> NodeId:
    """The id behind a Node-or-id argument, unvalidated.

    Lookups use this so an id that can never be live simply misses.
    """
    if isinstance(n, Node):
        return n.id
    return n


@dataclass(frozen=True, slots=True)
class Edge(Generic[P]):
    """Directed edge head -> tail with an opaque payload."""
    head: Node
    tail: Node
    payload: P | None = None

    def __post_init__(self) -> None:
        # accept bare ids for convenience; store Nodes
        object.__setattr__(self, "head", as_node(self.head))
        object.__setattr__(self, "tail", as_node(self.tail))


@dataclass(frozen=True, slots=True)
class WeightedEdge(Generic[P]):
    """An Edge paired with a scalar traversal cost."""
    edge: Edge[P]
    cost: Cost

    def __post_init__(self) -> None:
        if not isinstance(self.edge, Edge):
            raise TypeError(f"WeightedEdge wraps an Edge, got {type(self.edge).__name__}")
        if isinstance(self.cost, bool) or not isinstance(self.cost, numbers.Real):
            raise TypeError(f"Edge cost must be a real number, got {type(self.cost).__name__}")
        cost = float(self.cost)
        if math.isnan(cost):
            raise ValueError("Edge cost must not be NaN")
        object.__setattr__(self, "cost", cost)

    @property
    def head(self) -> Node:
        return self.edge.head

    @property
    def tail(self) -> Node:
        return self.edge.tail

    @property
    def payload(self) -> P | None:
        return self.edge.payload
