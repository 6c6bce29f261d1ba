"""
engine/
-------
Host-side consumption layer: status policies, replay and recording.

    from engine import Stepper, Recorder, compare
"""

from engine.policy   import default_policy, bellman_ford_policy, policy_for
from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "default_policy",
    "bellman_ford_policy",
    "policy_for",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
