"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Start node marked visited          →  visit-node
  2. Every edge leaving the dequeued node →  explore-edge
     (also for neighbours already seen; the trace records every
     examination, not just tree edges)
  3. Newly discovered neighbour          →  visit-node
  4. Node fully processed                →  complete-node

If `end_id` is given the search stops as soon as that node is dequeued;
whatever is left in the queue is discarded.
"""

import logging
from collections import deque
from typing import Iterator, Optional

from graph import Graph
from algorithms.step import Step, visit, explore, complete

logger = logging.getLogger(__name__)


def bfs(
    graph: Graph,
    start_id: str,
    end_id: Optional[str] = None,
) -> Iterator[Step]:
    """
    Args:
        graph    : The graph to search.
        start_id : Starting node id.
        end_id   : Optional target; reaching it ends the trace early.
    """

    queue   = deque([start_id])
    visited = {start_id}

    yield visit(start_id, f"Start BFS from node {start_id}")

    while queue:
        current = queue.popleft()

        if current == end_id:
            yield complete(current, f"Target node {current} found! BFS complete.")
            logger.debug("bfs: reached %s, %d node(s) left in queue", current, len(queue))
            return

        for nbr, edge in graph.neighbours(current):
            yield explore(edge.id, f"Exploring edge from {current} to {nbr}")

            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)
                yield visit(nbr, f"Visit node {nbr} from {current}")

        yield complete(current, f"Completed processing node {current}")
