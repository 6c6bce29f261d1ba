"""
dfs.py — Depth-First Search
=============================
Generator-based DFS with recursive semantics, driven by an explicit stack
of neighbour iterators (no Python recursion limit issues on deep graphs).

Yields a Step at:
  1. Entering a node                      →  visit-node
  2. Following an edge to an UNVISITED    →  explore-edge
     neighbour (edges to visited nodes are not inspected, so not traced)
  3. Leaving a node after its subtree     →  complete-node ("backtrack")

With an `end_id`, entering the target emits complete-node and ends the
whole trace at once: the nodes still on the stack do not backtrack.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from graph import Graph, Edge
from algorithms.step import Step, visit, explore, complete

logger = logging.getLogger(__name__)


def dfs(
    graph: Graph,
    start_id: str,
    end_id: Optional[str] = None,
) -> Iterator[Step]:

    visited = {start_id}
    yield visit(start_id, f"Visit node {start_id} (DFS)")
    if start_id == end_id:
        yield complete(start_id, f"Target node {start_id} found! DFS complete.")
        return

    # each frame: (node, iterator over its neighbours); the iterator
    # re-checks `visited` lazily, exactly like a recursive for-loop would
    stack: List[Tuple[str, Iterator[Tuple[str, Edge]]]] = [
        (start_id, iter(graph.neighbours(start_id)))
    ]

    while stack:
        node, nbrs = stack[-1]

        for nbr, edge in nbrs:
            if nbr in visited:
                continue

            yield explore(edge.id, f"Exploring edge from {node} to {nbr}")

            visited.add(nbr)
            yield visit(nbr, f"Visit node {nbr} (DFS)")

            if nbr == end_id:
                yield complete(nbr, f"Target node {nbr} found! DFS complete.")
                logger.debug("dfs: reached %s at depth %d", nbr, len(stack))
                return

            stack.append((nbr, iter(graph.neighbours(nbr))))
            break
        else:
            stack.pop()
            yield complete(node, f"Backtracking from node {node}")
