"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

The k-i-j nesting is what makes the algorithm correct; keep it.  All three
loops walk the graph's canonical (insertion) node order.

Matrix seeding only looks at edges as stored, source → target.  An
undirected graph built with one edge per pair is therefore NOT mirrored;
callers who want symmetric distances must list both directions.
Diagonal cells start at 0 and are never relaxed.

Yields a Step for every relaxation that actually changes the matrix:
  1. explore-edge  – the direct i → j edge, or edge_id=None if there is none
  2. visit-node(j) – with the new distance
No start or end node is used.
"""

import logging
from typing import Iterator, List, Dict, Optional, Tuple

from graph import Graph
from algorithms.step import Step, visit, explore

logger = logging.getLogger(__name__)

Matrix = Dict[str, Dict[str, float]]


def floyd_warshall(
    graph: Graph,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
) -> Iterator[Step]:
    """start_id / end_id are accepted for a uniform signature and ignored."""

    dist = initial_matrix(graph)
    count = 0
    for k, i, j in _relaxations(graph, dist):
        count += 1
        edge = graph.directed_edge(i, j)
        yield explore(
            edge.id if edge else None,
            f"Checking path {i} -> {j} via {k}",
        )
        yield visit(j, f"Update distance {i} -> {j} to {dist[i][j]} via {k}")

    logger.debug("floyd-warshall: %d relaxation(s) over %d node(s)", count, graph.node_count())


def shortest_distances(graph: Graph) -> Matrix:
    """Final all-pairs matrix as {i: {j: distance}}, +inf where unreachable."""
    dist = initial_matrix(graph)
    for _ in _relaxations(graph, dist):
        pass
    return dist


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def initial_matrix(graph: Graph) -> Matrix:
    """Diagonal = 0, direct source → target edge = cost (cheapest wins), rest = ∞."""
    INF   = float("inf")
    nodes = graph.node_ids()
    dist: Matrix = {i: {j: (0 if i == j else INF) for j in nodes} for i in nodes}

    for edge in graph.edges:
        u, v = edge.source, edge.target
        if u not in dist or v not in dist or u == v:
            continue
        if edge.cost < dist[u][v]:
            dist[u][v] = edge.cost
    return dist


def _relaxations(graph: Graph, dist: Matrix) -> Iterator[Tuple[str, str, str]]:
    """Run the triple loop in place, yielding (k, i, j) after each improvement."""
    INF   = float("inf")
    nodes: List[str] = graph.node_ids()

    for k in nodes:
        for i in nodes:
            if dist[i][k] == INF:
                continue          # nothing reaches k from i yet
            for j in nodes:
                if i == j or dist[k][j] == INF:
                    continue
                new_dist = dist[i][k] + dist[k][j]
                if new_dist < dist[i][j]:
                    dist[i][j] = new_dist
                    yield k, i, j
