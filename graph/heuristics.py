"""
heuristics.py — A* Heuristic Estimates
=======================================
A* reads `Node.heuristic` and nothing else.  These helpers fill that
field from layout coordinates before a run, as part of building the
graph.  The trace engine never calls them.

Built-ins (all take two Node objects, return float):
  • manhattan   – |Δx| + |Δy|
  • euclidean   – √(Δx² + Δy²)
  • octile      – max(|Δx|,|Δy|) + (√2-1)·min(|Δx|,|Δy|)
  • zero        – always 0, A* behaves like Dijkstra
"""

import math
from typing import Callable, Dict

from graph.graph import Graph
from graph.node import Node


def manhattan(a: Node, b: Node) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)

def euclidean(a: Node, b: Node) -> float:
    return a.distance_to(b)

def octile(a: Node, b: Node) -> float:
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return max(dx, dy) + (math.sqrt(2) - 1) * min(dx, dy)

def zero(a: Node, b: Node) -> float:
    return 0.0

HEURISTICS: Dict[str, Callable[[Node, Node], float]] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "octile":    octile,
    "zero":      zero,
}


def assign_heuristics(graph: Graph, goal_id: str, name: str = "euclidean") -> bool:
    """
    Set every node's heuristic to its estimated distance to `goal_id`.

    Returns False (and leaves the graph untouched) when the goal is not
    in the graph.  Raises KeyError for an unknown heuristic name.
    """
    h_fn = HEURISTICS[name]
    goal = graph.find_node(goal_id)
    if goal is None:
        return False
    for node in graph.nodes.values():
        node.heuristic = h_fn(node, goal)
    return True
