"""
Demo: Temporary Firewall Rule Lifecycle

Runs the firewall rule step through the orchestrator three times:
1. A build that succeeds (rule created, then deleted during cleanup)
2. A build where a later step halts (rule still deleted)
3. A build whose rule creation times out (nothing recorded, nothing deleted)

Uses the in-memory compute driver (no cloud project needed).
"""
import asyncio
import logging

from core.application.state import BuildState
from core.application.steps import Step, StepCreateFirewallRule
from core.domain.enums.step_action import StepAction
from core.infrastructure.adapters.compute import MockComputeDriver
from core.infrastructure.adapters.ui import ConsoleUi
from core.infrastructure.logging import configure_logging
from core.settings import BuildSettings
from orchestration import create_default_orchestrator


logger = logging.getLogger(__name__)


class StepProvisionImage(Step):
    """Stand-in for the steps that would run while the rule is open."""

    def __init__(self, fail: bool = False):
        self.fail = fail

    async def execute(self, state: BuildState) -> StepAction:
        state.ui.say("Provisioning image over SSH...")
        if self.fail:
            state.error = RuntimeError("provisioner exited with status 1")
            state.ui.error(str(state.error))
            return StepAction.HALT
        state.ui.message(f"Connected through firewall rule {state.firewall_rule_name}")
        return StepAction.CONTINUE

    async def compensate(self, state: BuildState) -> None:
        return None


async def run_build(title: str, driver: MockComputeDriver, settings: BuildSettings, fail_provisioning: bool = False):
    print("\n" + "=" * 80)
    print(f"DEMO: {title}")
    print("=" * 80 + "\n")

    state = BuildState(config=settings, driver=driver, ui=ConsoleUi(prefix=settings.instance_name))
    orchestrator = create_default_orchestrator(name="image-build")
    result = await orchestrator.run(
        [StepCreateFirewallRule(debug=settings.debug), StepProvisionImage(fail=fail_provisioning)],
        state,
    )

    print(f"\n📊 Status: {result.status.value}")
    for step in result.steps:
        print(f"   {step.name}: {step.action.value} ({step.duration_ms}ms)")
    print(f"   Compensated: {', '.join(result.compensated)}")
    if result.error:
        print(f"   Error: {result.error}")
    print(f"   Rules left on provider: {sorted(driver.rules) or 'none'}")


async def main():
    """Run all demos."""
    configure_logging()

    try:
        await run_build(
            "Successful build",
            MockComputeDriver(delay=0.1),
            BuildSettings(instance_name="demo-ok", tags=["packer-build"], debug=True),
        )

        await run_build(
            "Provisioning halts",
            MockComputeDriver(delay=0.1),
            BuildSettings(instance_name="demo-halt", tags=["packer-build"]),
            fail_provisioning=True,
        )

        slow_driver = MockComputeDriver()
        slow_driver.hold("create")
        await run_build(
            "Creation times out",
            slow_driver,
            BuildSettings(instance_name="demo-timeout", tags=["packer-build"], state_timeout="1s"),
        )
        # The provider finishes the create after the build gave up on it
        slow_driver.release("create")
        await asyncio.sleep(0)
        print(f"   Orphaned rules after late completion: {sorted(slow_driver.rules)}")

        print("\n✅ All demos completed!")

    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"\n❌ Demo failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
