"""
step.py — Trace Step Event
===========================
Every algorithm is a generator that yields Step objects.
A Step is one discrete event in the algorithm's execution:

    • visit-node     – a node was discovered / reached / improved
    • explore-edge   – an edge was examined
    • complete-node  – a node was finished (processed, finalised, backtracked)

Design decisions:
  - Step is a frozen dataclass.  It says WHAT happened, never what colour
    anything should turn.  Mapping events to display status is the host's
    job (see engine.policy).
  - node_id / edge_id are plain ids, looked up by the host when applying.
    Either may be None (e.g. a Floyd-Warshall relaxation with no direct edge).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class StepType(Enum):
    VISIT_NODE    = "visit-node"
    EXPLORE_EDGE  = "explore-edge"
    COMPLETE_NODE = "complete-node"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        type        : What kind of event this is.
        node_id     : Node the event is about (visit / complete).
        edge_id     : Edge the event is about (explore).
        description : Plain-English account of the event.
    """

    type:         StepType
    node_id:      Optional[str] = None
    edge_id:      Optional[str] = None
    description:  str           = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":        self.type.value,
            "node_id":     self.node_id,
            "edge_id":     self.edge_id,
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# Constructors so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
def visit(node_id: str, description: str) -> Step:
    return Step(StepType.VISIT_NODE, node_id=node_id, description=description)


def explore(edge_id: Optional[str], description: str) -> Step:
    return Step(StepType.EXPLORE_EDGE, edge_id=edge_id, description=description)


def complete(node_id: str, description: str) -> Step:
    return Step(StepType.COMPLETE_NODE, node_id=node_id, description=description)
