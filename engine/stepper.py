"""
stepper.py — Step-by-Step Replay Cursor
========================================
The Stepper is the object a host holds while showing a finished run.
It owns the immutable trace, remembers which step is on screen, and can
rebuild every node / edge status for any position in the trace.

State machine:
    IDLE      →  start()            →  READY   (cursor on step 0)
    READY     →  next / prev / goto →  READY
    READY     →  last step reached  →  FINISHED
    FINISHED  →  prev / goto / rewind → READY
    any       →  reset()            →  IDLE

Statuses are never patched incrementally.  `statuses_at(i)` starts from a
clean slate, marks the start / end nodes, then replays steps 0..i through
the algorithm's policy.  Seeking backwards is therefore the same
operation as seeking forwards.  Start and end nodes keep their marker
status no matter what the trace says about them.

There is no clock here: timed playback belongs to whoever drives the
cursor.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

from algorithms.step import Step
from engine.policy import Policy, policy_for
from graph import Graph, NodeStatus, EdgeStatus

logger = logging.getLogger(__name__)

NodeStatuses = Dict[str, NodeStatus]
EdgeStatuses = Dict[str, EdgeStatus]

_PINNED = (NodeStatus.START, NodeStatus.END)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        trace       : The immutable tuple of Steps being replayed.
        current_idx : Index into `trace` that is currently displayed (-1 = none).
        algorithm   : Registry key of the algorithm that produced the trace.
        on_step     : Optional callback(Step) fired every time the cursor moves.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.trace:       Tuple[Step, ...] = ()
        self.current_idx: int              = -1
        self.state:       StepperState     = StepperState.IDLE
        self.algorithm:   str              = ""
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self._graph:    Optional[Graph] = None
        self._start_id: Optional[str]   = None
        self._end_id:   Optional[str]   = None
        self._policy:   Policy          = policy_for("")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self,
        trace: Sequence[Step],
        algorithm: str,
        graph: Graph,
        start_id: Optional[str] = None,
        end_id: Optional[str] = None,
    ) -> None:
        """Attach a finished trace and put the cursor on step 0."""
        self.trace       = tuple(trace)
        self.algorithm   = algorithm
        self.current_idx = -1
        self.state       = StepperState.READY
        self._graph      = graph
        self._start_id   = start_id
        self._end_id     = end_id
        self._policy     = policy_for(algorithm)

        if self.trace:
            self._goto(0)
        else:
            self.state = StepperState.FINISHED

    def reset(self) -> None:
        """Back to IDLE; caller must call start() again."""
        self.trace       = ()
        self.current_idx = -1
        self.state       = StepperState.IDLE
        self._graph      = None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.trace):
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if 0 <= idx < len(self.trace):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.trace:
            self._goto(0)

    def jump_to_end(self) -> None:
        if self.trace:
            self._goto(len(self.trace) - 1)

    # ------------------------------------------------------------------
    # Status reconstruction
    # ------------------------------------------------------------------
    def statuses_at(self, idx: int) -> Tuple[NodeStatuses, EdgeStatuses]:
        """
        Node and edge statuses after steps 0..idx have been applied.

        idx = -1 gives the initial picture (only start / end marked).
        Steps naming ids the graph does not have are ignored.

        Raises:
            IndexError: idx is outside -1..len(trace)-1.
        """
        if self._graph is None:
            return {}, {}
        if not -1 <= idx < len(self.trace):
            raise IndexError(f"step index {idx} out of range for {len(self.trace)} step(s)")

        nodes: NodeStatuses = {nid: NodeStatus.DEFAULT for nid in self._graph.nodes}
        edges: EdgeStatuses = {e.id: EdgeStatus.DEFAULT for e in self._graph.edges}

        if self._start_id in nodes:
            nodes[self._start_id] = NodeStatus.START
        if self._end_id in nodes:
            nodes[self._end_id] = NodeStatus.END

        for step in self.trace[: idx + 1]:
            node_status, edge_status = self._policy(step)
            if node_status is not None and step.node_id in nodes:
                if nodes[step.node_id] not in _PINNED:
                    nodes[step.node_id] = node_status
            if edge_status is not None and step.edge_id in edges:
                edges[step.edge_id] = edge_status

        return nodes, edges

    def current_statuses(self) -> Tuple[NodeStatuses, EdgeStatuses]:
        return self.statuses_at(self.current_idx)

    def apply(self) -> None:
        """Write the statuses for the current step onto the graph itself."""
        if self._graph is None:
            return
        nodes, edges = self.current_statuses()
        for nid, status in nodes.items():
            self._graph.nodes[nid].status = status
        for edge in self._graph.edges:
            edge.status = edges.get(edge.id, EdgeStatus.DEFAULT)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.trace):
            return self.trace[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.trace)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self.state = (
            StepperState.FINISHED if idx == len(self.trace) - 1 else StepperState.READY
        )
        step = self.trace[idx]
        logger.debug("%s: step %d/%d %s", self.algorithm, idx, len(self.trace), step.type.value)
        if self.on_step:
            self.on_step(step)
