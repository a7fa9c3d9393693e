"""Preference model updates driven by viewer interactions."""

from .recorder import FailureCallback, InteractionRecorder
from .transitions import InteractionPlan, apply_plan, plan_interaction

__all__ = [
    "FailureCallback",
    "InteractionPlan",
    "InteractionRecorder",
    "apply_plan",
    "plan_interaction",
]
