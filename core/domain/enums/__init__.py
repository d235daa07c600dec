"""Domain enums."""

from .execution_status import ExecutionStatus
from .operation_status import OperationStatus
from .step_action import StepAction

__all__ = ["ExecutionStatus", "OperationStatus", "StepAction"]
