"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over a plain working list that is re-sorted
every iteration (NOT a heap).

Python's sort is stable, so among entries with equal distance the one
pushed first is extracted first.  The Step order depends on that
tie-break; heapq would break ties differently.

Yields a Step at:
  1. Node extracted & finalised           →  complete-node
  2. Every edge leaving it                →  explore-edge (even towards
                                             finalised neighbours)
  3. Strict improvement of a neighbour    →  visit-node

Stale entries (a node pushed again with a better distance) stay in the
list and are dropped when extracted after their node is finalised.

Dijkstra requires non-negative weights.  Negative weights are not
detected; use Bellman-Ford for those graphs.
"""

import logging
from typing import Iterator, Optional, List, Dict, Tuple

from graph import Graph
from algorithms.step import Step, visit, explore, complete

logger = logging.getLogger(__name__)


def dijkstra(
    graph: Graph,
    start_id: str,
    end_id: Optional[str] = None,
) -> Iterator[Step]:

    INF = float("inf")

    dist:      Dict[str, float]        = {nid: INF for nid in graph.nodes}
    dist[start_id] = 0
    working:   List[Tuple[str, float]] = [(start_id, 0)]
    finalised: set                     = set()

    while working:
        working.sort(key=lambda entry: entry[1])
        current, _ = working.pop(0)

        # stale entry
        if current in finalised:
            continue

        finalised.add(current)
        yield complete(current, f"Finalize node {current} with distance {dist[current]}")

        if current == end_id:
            logger.debug("dijkstra: target %s finalised at distance %s", current, dist[current])
            return

        for nbr, edge in graph.neighbours(current):
            yield explore(edge.id, f"Checking edge {current} -> {nbr} (weight {edge.cost})")

            candidate = dist[current] + edge.cost
            if candidate < dist.get(nbr, INF):
                dist[nbr] = candidate
                working.append((nbr, candidate))
                yield visit(nbr, f"Update distance of {nbr} to {candidate}")
