"""Domain layer - pure domain models and errors."""

from .entities import FirewallAllowed, FirewallRule, temporary_rule_name
from .enums import ExecutionStatus, OperationStatus, StepAction
from .errors import (
    FirewallRuleError,
    FirewallRuleOperationError,
    FirewallRuleSubmissionError,
    ImageForgeError,
    OperationTimeoutError,
)
from .value_objects import OperationResult, PendingOperation

__all__ = [
    "ExecutionStatus",
    "FirewallAllowed",
    "FirewallRule",
    "FirewallRuleError",
    "FirewallRuleOperationError",
    "FirewallRuleSubmissionError",
    "ImageForgeError",
    "OperationResult",
    "OperationStatus",
    "OperationTimeoutError",
    "PendingOperation",
    "StepAction",
    "temporary_rule_name",
]
