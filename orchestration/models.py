"""Orchestration models - StepResult, WorkflowResult."""

from dataclasses import dataclass, field
from datetime import datetime

from core.domain.enums.execution_status import ExecutionStatus
from core.domain.enums.step_action import StepAction


@dataclass
class StepResult:
    """Result of running one step's forward action."""

    name: str
    action: StepAction
    duration_ms: int
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.action is StepAction.CONTINUE


@dataclass
class WorkflowResult:
    """Result of a build run."""

    run_id: str
    name: str
    status: ExecutionStatus
    started_at: datetime
    finished_at: datetime
    steps: list[StepResult]
    compensated: list[str] = field(default_factory=list)
    error: str | None = None
