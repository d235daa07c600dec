"""Application layer - interfaces, shared build state and steps."""

from .interfaces import IComputeDriver, IUi
from .state import BuildState
from .steps import Step, StepCreateFirewallRule

__all__ = [
    "BuildState",
    "IComputeDriver",
    "IUi",
    "Step",
    "StepCreateFirewallRule",
]
