"""Build steps."""

from .base import Step
from .create_firewall_rule import StepCreateFirewallRule

__all__ = ["Step", "StepCreateFirewallRule"]
