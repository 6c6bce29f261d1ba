"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Single-source shortest paths that tolerate NEGATIVE edge weights and
detect (but do not reconstruct) negative cycles.

Structure:
  • Up to |V|-1 passes relaxing every edge in edge-list order, in the
    direction it is stored (source → target).  Adjacency is not used.
  • One extra detector pass.

Yields a Step for:
  1. Each successful relaxation           →  explore-edge, then visit-node(target)
  2. Negative cycle found                 →  one explore-edge, then the trace ends

Failed relaxations emit nothing, so a pass that changes nothing is the
last one needed and the remaining passes are skipped.

Hosts replaying this trace map node steps straight to "visited" instead
of a transient "active" (see engine.policy.bellman_ford_policy), since
the same node can be relaxed several times across passes.
"""

import logging
from typing import Iterator, Optional, Dict

from graph import Graph
from algorithms.step import Step, visit, explore

logger = logging.getLogger(__name__)

NEGATIVE_CYCLE = "negative weight cycle detected"


def bellman_ford(
    graph: Graph,
    start_id: str,
    end_id: Optional[str] = None,
) -> Iterator[Step]:
    """`end_id` is accepted for a uniform signature and ignored."""

    INF = float("inf")
    V   = graph.node_count()

    dist: Dict[str, float] = {nid: INF for nid in graph.nodes}
    dist[start_id] = 0

    # dangling edges can't take part in relaxation
    edges = [e for e in graph.edges if graph.has_node(e.source) and graph.has_node(e.target)]

    # ==============================================================
    # MAIN PASSES
    # ==============================================================
    for pass_no in range(1, V):
        relaxed = False

        for edge in edges:
            u, v, w = edge.source, edge.target, edge.cost
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                relaxed = True
                yield explore(edge.id, f"Relaxing edge {u} -> {v} (weight {w}) in pass {pass_no}")
                yield visit(v, f"Update distance of {v} to {dist[v]} (predecessor {u})")

        if not relaxed:
            logger.debug("bellman-ford: converged after pass %d of %d", pass_no, V - 1)
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    for edge in edges:
        if dist[edge.source] + edge.cost < dist[edge.target]:
            logger.debug("bellman-ford: negative cycle through edge %s", edge.id)
            yield explore(edge.id, NEGATIVE_CYCLE)
            return
