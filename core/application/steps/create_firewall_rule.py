"""
Temporary firewall rule step.

Opens SSH to the build instance for the duration of the build and removes the
rule again during cleanup.
"""
import logging
from datetime import timedelta
from typing import Optional

from core.application.interfaces import IComputeDriver
from core.application.state import BuildState
from core.application.steps.base import Step
from core.domain.entities import FirewallRule
from core.domain.enums.step_action import StepAction
from core.domain.errors import FirewallRuleError, OperationTimeoutError
from core.domain.value_objects.operation import OperationResult


logger = logging.getLogger(__name__)


async def _await_operation(
    driver_call, timeout: timedelta, timeout_message: str
) -> Optional[BaseException]:
    """
    Submit a driver request and wait for it with a deadline.

    Returns:
        None on success, otherwise the submission, provider or timeout error
    """
    try:
        operation = await driver_call()
    except Exception as exc:
        return exc

    result: OperationResult = await operation.wait(timeout)
    if result.is_timed_out:
        # The remote operation keeps running; only our wait ends here.
        return OperationTimeoutError(timeout_message)
    return result.error


class StepCreateFirewallRule(Step):
    """
    Creates a temporary firewall rule allowing SSH to the build instance.

    On success the rule name is stored in ``state.firewall_rule_name`` so
    ``compensate`` can delete it later.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    async def execute(self, state: BuildState) -> StepAction:
        config = state.config
        driver: IComputeDriver = state.driver
        ui = state.ui

        ui.say("Creating temporary firewall rule...")
        rule = FirewallRule.temporary_ssh(
            instance_name=config.instance_name,
            network=config.network,
            tags=config.tags,
        )

        async def submit():
            operation = await driver.create_firewall_rule(rule)
            ui.message("Waiting for creation operation to complete...")
            return operation

        cause = await _await_operation(
            submit,
            config.state_timeout,
            "time out while waiting for firewall rule to create",
        )

        if cause is not None:
            error = FirewallRuleError(
                f"Error creating firewall rule: {cause}",
                action="create",
                rule_name=rule.name,
            )
            error.__cause__ = cause
            state.error = error
            ui.error(str(error))
            logger.error(f"Firewall rule {rule.name} was not created: {cause}")
            return StepAction.HALT

        ui.message("Firewall rule has been created!")
        if self.debug:
            ui.message(f"Firewall rule: {rule.name} created")

        # Only a confirmed rule is recorded for removal
        state.firewall_rule_name = rule.name
        logger.info(f"Firewall rule {rule.name} created")
        return StepAction.CONTINUE

    async def compensate(self, state: BuildState) -> None:
        name = state.firewall_rule_name
        if not name:
            return

        driver: IComputeDriver = state.driver
        ui = state.ui

        ui.say("Deleting temporary firewall rule...")
        cause = await _await_operation(
            lambda: driver.delete_firewall_rule(name),
            state.config.state_timeout,
            "time out while waiting for firewall rule to delete",
        )

        if cause is not None:
            ui.error(
                "Error deleting firewall rule. Please delete it manually.\n\n"
                f"Name: {name}\n"
                f"Error: {cause}"
            )
            logger.error(f"Firewall rule {name} was not deleted: {cause}")
        else:
            logger.info(f"Firewall rule {name} deleted")

        ui.message("Firewall rule has been deleted!")
        state.firewall_rule_name = ""
