"""
astar.py — A* Search
=====================
Generator-based A* guided by each node's `heuristic` field (see
graph.heuristics for helpers that fill it).  A missing heuristic counts
as 0, which degrades A* to Dijkstra.

The open set is a dict used as an insertion-ordered set.  Selection is a
linear scan that keeps the FIRST element with the smallest f-score, so
ties go to whichever node entered the open set earliest.  Re-adding a
node already in the set keeps its original position.

Yields a Step at:
  1. Node selected from the open set      →  visit-node
  2. Goal selected                        →  complete-node ("goal reached"), end
  3. Every edge leaving the selected node →  explore-edge
  4. Strict g-score improvement           →  visit-node (new f-score)
  5. Node fully expanded                  →  complete-node

There is no closed set: a node whose g-score improves after expansion
re-enters the open set and may be expanded again.
"""

import logging
from typing import Iterator, Optional, Dict

from graph import Graph
from algorithms.step import Step, visit, explore, complete

logger = logging.getLogger(__name__)


class MissingEndNodeError(ValueError):
    """Raised when a goal-directed algorithm is run without an end node."""


def astar(
    graph: Graph,
    start_id: str,
    end_id: Optional[str] = None,
) -> Iterator[Step]:
    """
    Args:
        graph    : The graph.
        start_id : Start node id.
        end_id   : Goal node id.  Required.

    Raises:
        MissingEndNodeError: end_id is None (raised on first iteration).
    """
    if end_id is None:
        raise MissingEndNodeError("A* requires an end node")

    INF = float("inf")

    g_score: Dict[str, float] = {nid: INF for nid in graph.nodes}
    f_score: Dict[str, float] = {nid: INF for nid in graph.nodes}
    g_score[start_id] = 0
    f_score[start_id] = _h(graph, start_id)

    open_set: Dict[str, None] = {start_id: None}

    while open_set:
        current = None
        best    = INF
        for nid in open_set:
            f = f_score.get(nid, INF)
            if current is None or f < best:
                current, best = nid, f

        yield visit(current, f"Expanding node {current} (f={_fmt(best)})")

        if current == end_id:
            yield complete(current, f"Goal {current} reached! A* complete.")
            logger.debug("a-star: goal %s reached, g=%s", current, g_score[current])
            return

        del open_set[current]

        for nbr, edge in graph.neighbours(current):
            yield explore(edge.id, f"Checking edge {current} -> {nbr} (weight {edge.cost})")

            tentative_g = g_score[current] + edge.cost
            if tentative_g < g_score.get(nbr, INF):
                g_score[nbr] = tentative_g
                f_score[nbr] = tentative_g + _h(graph, nbr)
                open_set.setdefault(nbr, None)
                yield visit(nbr, f"Update {nbr}: g={_fmt(tentative_g)}, f={_fmt(f_score[nbr])}")

        yield complete(current, f"Completed expanding node {current}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _h(graph: Graph, node_id: str) -> float:
    node = graph.find_node(node_id)
    return node.h if node is not None else 0.0


def _fmt(value: float) -> str:
    return f"{value:.2f}"
