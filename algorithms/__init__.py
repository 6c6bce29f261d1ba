"""
algorithms/__init__.py — Algorithm Registry & Dispatcher
==========================================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm, run

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, tags, requires_end, …),
        …
    }

`run()` is the one entry point hosts should call: it looks the key up,
enforces the end-node contract and materialises the generator into an
immutable tuple, so the host can index it freely.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Dict, Optional, Tuple

from graph import Graph
from algorithms.step import Step, StepType

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs            import bfs            as _bfs
from algorithms.dfs            import dfs            as _dfs
from algorithms.dijkstra       import dijkstra       as _dijkstra
from algorithms.astar          import astar          as _astar, MissingEndNodeError
from algorithms.bellman_ford   import bellman_ford   as _bf
from algorithms.floyd_warshall import floyd_warshall as _fw

logger = logging.getLogger(__name__)

Trace = Tuple[Step, ...]


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable[..., Iterator[Step]]   # (graph, start_id, end_id) generator
    tags:              List[str] = field(default_factory=list)   # e.g. ["unweighted", "traversal"]
    requires_end:      bool     = False       # refuses to run without an end node
    uses_start:        bool     = True        # False for all-pairs algorithms
    supports_negative: bool     = False       # can handle negative edges?
    is_all_pairs:      bool     = False       # Floyd-Warshall style?
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for a UI card

    def to_dict(self) -> Dict[str, object]:
        return {
            "key":               self.key,
            "label":             self.label,
            "tags":              list(self.tags),
            "requires_end":      self.requires_end,
            "uses_start":        self.uses_start,
            "supports_negative": self.supports_negative,
            "is_all_pairs":      self.is_all_pairs,
            "complexity_time":   self.complexity_time,
            "complexity_space":  self.complexity_space,
            "description":       self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Optional end node stops the search early.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra,
        tags=["weighted", "shortest-path"],
        complexity_time="O(V² log V)", complexity_space="O(V + E)",
        description="Greedily finalises the closest node. Optimal for non-negative weights.",
    ),

    "a-star": AlgoInfo(
        key="a-star", label="A* Search", fn=_astar,
        tags=["weighted", "shortest-path", "heuristic"],
        requires_end=True,
        complexity_time="O(V · (V + E))", complexity_space="O(V)",
        description="Dijkstra + heuristic guidance. Needs an end node.",
    ),

    "bellman-ford": AlgoInfo(
        key="bellman-ford", label="Bellman–Ford", fn=_bf,
        tags=["weighted", "shortest-path", "negative-edges"],
        supports_negative=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Detects negative cycles. Slower than Dijkstra.",
    ),

    "floyd-warshall": AlgoInfo(
        key="floyd-warshall", label="Floyd–Warshall", fn=_fw,
        tags=["weighted", "all-pairs", "negative-edges"],
        uses_start=False, supports_negative=True, is_all_pairs=True,
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths via dynamic programming.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------
def run(
    graph: Graph,
    algorithm: str,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
) -> Trace:
    """
    Compute the full trace for `algorithm` and return it as a tuple.

    Unknown keys give an empty trace rather than an error.  An empty end
    id counts as no end node.  Nothing about the graph or the node ids is
    validated here; negative weights fed to an algorithm that cannot
    handle them only log a warning.

    Raises:
        MissingEndNodeError: the algorithm requires an end node and
                             none was given.
    """
    end_id = end_id or None

    info = get_algorithm(algorithm)
    if info is None:
        logger.warning("unknown algorithm %r, returning empty trace", algorithm)
        return ()

    if info.requires_end and end_id is None:
        raise MissingEndNodeError(f"{info.label} requires an end node")

    if "weighted" in info.tags and not info.supports_negative and graph.has_negative_edges():
        logger.warning("%s on a graph with negative edges; distances may be wrong", info.key)

    steps = tuple(info.fn(graph, start_id, end_id))
    logger.debug(
        "%s from %s to %s: %d step(s)", info.key, start_id, end_id, len(steps)
    )
    return steps


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "MissingEndNodeError",
    "Step",
    "StepType",
    "Trace",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "run",
]
