"""Orchestrator - runs build steps and always compensates the ones entered."""

import asyncio
from collections.abc import Sequence
from datetime import datetime, timezone
from uuid import uuid4

from core.application.state import BuildState
from core.application.steps.base import Step
from core.domain.enums.execution_status import ExecutionStatus
from core.domain.enums.step_action import StepAction
from imageforge_sdk.logging import get_logger

from .bus import EventBusProtocol
from .events import Event, EventMetadata
from .models import StepResult, WorkflowResult


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _elapsed_ms(started_at: datetime) -> int:
    return int((utc_now() - started_at).total_seconds() * 1000)


class Orchestrator:
    """Runs steps in order, stops at the first halt, then compensates.

    Every step whose ``execute`` was entered gets ``compensate`` called, in
    reverse order, whether the run succeeded, halted or was cancelled. The
    orchestrator never retries a step.
    """

    def __init__(self, event_bus: EventBusProtocol, name: str = "build") -> None:
        """Initialize orchestrator.

        Args:
            event_bus: EventBusProtocol for publishing lifecycle events
            name: Workflow name used in events and logs
        """
        self._event_bus = event_bus
        self._name = name
        self._logger = get_logger("orchestration.orchestrator")

    async def run(self, steps: Sequence[Step], state: BuildState) -> WorkflowResult:
        """Run a sequence of steps against one build state.

        Args:
            steps: Steps in execution order
            state: Shared build state

        Returns:
            WorkflowResult with per-step outcomes
        """
        run_id = uuid4().hex
        started_at = utc_now()

        self._logger.info(f"Run {run_id} of {self._name} starting with {len(steps)} step(s)")
        await self._publish_event(
            "workflow.started", run_id, {"workflow_name": self._name, "step_count": len(steps)}
        )

        step_results: list[StepResult] = []
        entered: list[Step] = []
        compensated: list[str] = []

        try:
            for step in steps:
                entered.append(step)
                step_result = await self._execute_step(run_id, step, state)
                step_results.append(step_result)

                if step_result.action is StepAction.HALT:
                    self._logger.warning(
                        f"Run {run_id} halted at {step.name}: {step_result.error}"
                    )
                    break
        finally:
            for step in reversed(entered):
                await self._compensate_step(run_id, step, state)
                compensated.append(step.name)

        succeeded = len(step_results) == len(steps) and all(r.success for r in step_results)
        status = ExecutionStatus.SUCCESS if succeeded else ExecutionStatus.FAILED
        finished_at = utc_now()

        result = WorkflowResult(
            run_id=run_id,
            name=self._name,
            status=status,
            started_at=started_at,
            finished_at=finished_at,
            steps=step_results,
            compensated=compensated,
            error=str(state.error) if state.error is not None else None,
        )

        await self._publish_event(
            "workflow.finished",
            run_id,
            {
                "workflow_name": self._name,
                "status": status.value,
                "step_count": len(step_results),
                "success_count": sum(1 for r in step_results if r.success),
            },
        )
        self._logger.info(
            f"Run {run_id} of {self._name} finished: {status.value} "
            f"in {int((finished_at - started_at).total_seconds() * 1000)}ms"
        )
        return result

    async def _execute_step(self, run_id: str, step: Step, state: BuildState) -> StepResult:
        """Run one step's forward action.

        An exception escaping ``execute`` halts the run like a HALT signal.
        """
        started_at = utc_now()
        await self._publish_event("workflow.step.started", run_id, {"step_name": step.name})

        try:
            action = await step.execute(state)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            self._logger.error(f"Step {step.name} raised: {exc}", exc_info=True)
            if state.error is None:
                state.error = exc
            action = StepAction.HALT

        error = None
        if action is StepAction.HALT:
            error = str(state.error) if state.error is not None else "step halted"

        result = StepResult(
            name=step.name,
            action=action,
            duration_ms=_elapsed_ms(started_at),
            error=error,
        )

        event_name = "workflow.step.continued" if result.success else "workflow.step.halted"
        payload: dict[str, object] = {"step_name": step.name, "duration_ms": result.duration_ms}
        if error is not None:
            payload["error"] = error
        await self._publish_event(event_name, run_id, payload)
        return result

    async def _compensate_step(self, run_id: str, step: Step, state: BuildState) -> None:
        try:
            await step.compensate(state)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            # Cleanup must carry on with the remaining steps
            self._logger.error(f"Compensation of {step.name} raised: {exc}", exc_info=True)

        await self._publish_event("workflow.step.compensated", run_id, {"step_name": step.name})

    async def _publish_event(self, name: str, run_id: str, payload: dict[str, object]) -> None:
        metadata = EventMetadata(run_id=run_id, workflow=self._name, timestamp=utc_now())
        await self._event_bus.publish(Event(name=name, payload=payload, metadata=metadata))
