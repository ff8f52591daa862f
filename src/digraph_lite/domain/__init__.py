"""Value types shared by the graph containers."""

from digraph_lite.domain.elements import Edge, Node, WeightedEdge, as_node, node_id
from digraph_lite.domain.types import INFINITE_COST, Cost, NodeId

__all__ = [
    "Cost",
    "Edge",
    "INFINITE_COST",
    "Node",
    "NodeId",
    "WeightedEdge",
    "as_node",
    "node_id",
]
