"""
policy.py — Step → Display Status Mapping
==========================================
The trace engine says what happened; a policy says what colour that makes
things.  Policies are per algorithm because Bellman–Ford relaxes the same
node many times: flashing it "active" on every pass flickers, so its
nodes go straight to "visited".
"""

from typing import Callable, Optional, Tuple

from algorithms.step import Step, StepType
from graph import NodeStatus, EdgeStatus

# (status for step.node_id, status for step.edge_id); None = leave alone
StatusChange = Tuple[Optional[NodeStatus], Optional[EdgeStatus]]
Policy = Callable[[Step], StatusChange]


def default_policy(step: Step) -> StatusChange:
    node_status = None
    if step.node_id is not None:
        if step.type is StepType.VISIT_NODE:
            node_status = NodeStatus.ACTIVE
        elif step.type is StepType.COMPLETE_NODE:
            node_status = NodeStatus.VISITED
    edge_status = EdgeStatus.ACTIVE if step.edge_id is not None else None
    return node_status, edge_status


def bellman_ford_policy(step: Step) -> StatusChange:
    node_status = NodeStatus.VISITED if step.node_id is not None else None
    edge_status = EdgeStatus.ACTIVE if step.edge_id is not None else None
    return node_status, edge_status


POLICIES = {
    "bellman-ford": bellman_ford_policy,
}


def policy_for(algorithm: str) -> Policy:
    return POLICIES.get(algorithm, default_policy)
