"""Tests for Orchestrator - step sequencing."""

import pytest

from core.application.state import BuildState
from core.application.steps import Step, StepCreateFirewallRule
from core.domain.enums.execution_status import ExecutionStatus
from core.domain.enums.step_action import StepAction
from orchestration.orchestrator import Orchestrator


class FakeEventBus:
    """Fake EventBus for testing."""

    def __init__(self) -> None:
        """Initialize fake event bus."""
        self.events: list[object] = []

    async def publish(self, event: object) -> None:
        """Store event."""
        self.events.append(event)

    def subscribe(self, event_name: str, handler: object) -> None:
        """Subscribe handler (no-op for fake)."""
        pass


class RecordingStep(Step):
    """Step that records its calls in a shared journal."""

    def __init__(self, label: str, journal: list[str], action: StepAction = StepAction.CONTINUE):
        self.label = label
        self.journal = journal
        self.action = action

    @property
    def name(self) -> str:
        return self.label

    async def execute(self, state: BuildState) -> StepAction:
        self.journal.append(f"execute:{self.label}")
        if self.action is StepAction.HALT:
            state.error = RuntimeError(f"{self.label} failed")
        return self.action

    async def compensate(self, state: BuildState) -> None:
        self.journal.append(f"compensate:{self.label}")


@pytest.mark.asyncio
async def test_orchestrator_basic_success(build_state):
    """All steps continue; every step is compensated in reverse."""
    fake_event_bus = FakeEventBus()
    journal: list[str] = []

    orchestrator = Orchestrator(event_bus=fake_event_bus, name="test_build")
    result = await orchestrator.run(
        [RecordingStep("step_1", journal), RecordingStep("step_2", journal)],
        build_state,
    )

    assert result.status == ExecutionStatus.SUCCESS
    assert result.name == "test_build"
    assert [s.name for s in result.steps] == ["step_1", "step_2"]
    assert all(s.success for s in result.steps)
    assert result.error is None
    assert journal == [
        "execute:step_1",
        "execute:step_2",
        "compensate:step_2",
        "compensate:step_1",
    ]
    assert result.compensated == ["step_2", "step_1"]

    event_names = [event.name for event in fake_event_bus.events]
    assert event_names[0] == "workflow.started"
    assert event_names[-1] == "workflow.finished"
    assert event_names.count("workflow.step.continued") == 2
    assert event_names.count("workflow.step.compensated") == 2
    assert len({event.metadata.run_id for event in fake_event_bus.events}) == 1


@pytest.mark.asyncio
async def test_orchestrator_with_firewall_step(build_state, mock_driver):
    """The firewall rule exists while later steps run and is gone afterwards."""
    seen_rules: list[str] = []

    class InspectStep(Step):
        async def execute(self, state: BuildState) -> StepAction:
            seen_rules.extend(mock_driver.rules)
            assert state.firewall_rule_name == "packer-test-temporary-packer"
            return StepAction.CONTINUE

        async def compensate(self, state: BuildState) -> None:
            pass

    orchestrator = Orchestrator(event_bus=FakeEventBus())
    result = await orchestrator.run([StepCreateFirewallRule(), InspectStep()], build_state)

    assert result.status == ExecutionStatus.SUCCESS
    assert seen_rules == ["packer-test-temporary-packer"]
    assert mock_driver.rules == {}
    assert build_state.firewall_rule_name == ""
