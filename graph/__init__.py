"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeStatus, EdgeStatus
    from graph import node_id, edge_id
"""

from graph.node  import Node,  NodeStatus, node_id
from graph.edge  import Edge,  EdgeStatus, edge_id
from graph.graph import Graph

__all__ = [
    "Node",      "NodeStatus",
    "Edge",      "EdgeStatus",
    "Graph",
    "node_id",   "edge_id",
]
