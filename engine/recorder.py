"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (the whole trace), then computes the
summary numbers a host shows next to the replay and in Comparison Mode.

Usage:
    rec = Recorder()
    metrics = rec.record(g, "dijkstra", start_id="n0", end_id="n5")
    rec.export()                     # serialisable snapshot
    stepper = rec.stepper()          # replay cursor over the same trace

Comparison Mode:
    The host holds two Recorders (one per algorithm), records both on
    the SAME graph, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any

from graph import Graph
from algorithms import AlgoInfo, Trace, get_algorithm, run
from algorithms.bellman_ford import NEGATIVE_CYCLE
from algorithms.step import StepType
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    start:           Optional[str] = None
    end:             Optional[str] = None
    visit_steps:     int   = 0          # number of visit-node steps
    explore_steps:   int   = 0          # number of explore-edge steps
    complete_steps:  int   = 0          # number of complete-node steps
    nodes_visited:   int   = 0          # distinct nodes named by any node step
    edges_explored:  int   = 0          # distinct edge ids named by explore steps
    total_steps:     int   = 0
    end_reached:     bool  = False      # some node step names the end node
    negative_cycle:  bool  = False
    wall_time_ms:    float = 0.0        # wall-clock time to build the trace


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes:  str = ""   # which algorithm touched fewer nodes
    winner_edges:  str = ""
    winner_steps:  str = ""   # which algorithm produced the shorter trace

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : The recorded trace (empty until record() is called).
        metrics : Computed RunMetrics (available after record()).
    """

    def __init__(self):
        self.steps:     Trace                = ()
        self.metrics:   Optional[RunMetrics] = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._start:      Optional[str]      = None
        self._end:        Optional[str]      = None
        self._graph:      Optional[Graph]    = None

    # ------------------------------------------------------------------
    # Record
    # ------------------------------------------------------------------
    def record(
        self,
        graph: Graph,
        algo_key: str,
        start_id: Optional[str] = None,
        end_id: Optional[str] = None,
    ) -> RunMetrics:
        """
        Run `algo_key` through the dispatcher and compute its metrics.

        Raises:
            ValueError: unknown algorithm key, or (as MissingEndNodeError)
                        an algorithm that needs an end node got none.
        """
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._start     = start_id
        self._end       = end_id or None
        self._graph     = graph

        t0 = time.monotonic()
        self.steps = run(graph, algo_key, start_id, end_id)
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "recorded %s: %d step(s) in %.2f ms",
            info.key, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def stepper(self) -> Stepper:
        """A replay cursor positioned on step 0 of the recorded trace."""
        if self._algo_info is None or self._graph is None:
            raise RuntimeError("Call record() first.")
        cursor = Stepper()
        cursor.start(self.steps, self._algo_info.key, self._graph, self._start, self._end)
        return cursor

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "start":    self._start,
            "end":      self._end,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info  = self._algo_info
        steps = self.steps

        counts = {t: 0 for t in StepType}
        nodes, edges = set(), set()
        for s in steps:
            counts[s.type] += 1
            if s.node_id is not None:
                nodes.add(s.node_id)
            if s.edge_id is not None:
                edges.add(s.edge_id)

        last      = steps[-1] if steps else None
        neg_cycle = bool(
            last
            and last.type is StepType.EXPLORE_EDGE
            and last.description == NEGATIVE_CYCLE
        )

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            start=self._start,
            end=self._end,
            visit_steps=counts[StepType.VISIT_NODE],
            explore_steps=counts[StepType.EXPLORE_EDGE],
            complete_steps=counts[StepType.COMPLETE_NODE],
            nodes_visited=len(nodes),
            edges_explored=len(edges),
            total_steps=len(steps),
            end_reached=self._end is not None and self._end in nodes,
            negative_cycle=neg_cycle,
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two recorded Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited, l.algo_label, r.algo_label),
        winner_edges=winner(l.edges_explored, r.edges_explored, l.algo_label, r.algo_label),
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )
