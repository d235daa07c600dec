"""Tests for PendingOperation - deadline-bounded waits."""

import asyncio
import logging
import time
from datetime import timedelta

import pytest

from core.domain.enums.operation_status import OperationStatus
from core.domain.errors import FirewallRuleOperationError
from core.domain.value_objects.operation import OperationResult, PendingOperation


@pytest.mark.asyncio
async def test_wait_returns_ok_when_operation_succeeds_in_time():
    """Completion before the deadline yields OK."""
    operation = PendingOperation("create firewall rule r")
    asyncio.get_running_loop().call_later(0.01, operation.succeed)

    result = await operation.wait(1)

    assert result == OperationResult.ok()
    assert result.is_ok
    assert result.error is None


@pytest.mark.asyncio
async def test_wait_returns_provider_error():
    """A failed operation yields FAILED carrying the provider error."""
    operation = PendingOperation("create firewall rule r")
    error = FirewallRuleOperationError("quota exceeded")
    asyncio.get_running_loop().call_later(0.01, operation.fail, error)

    result = await operation.wait(timedelta(seconds=1))

    assert result.status is OperationStatus.FAILED
    assert result.error is error


@pytest.mark.asyncio
async def test_wait_times_out_without_cancelling_operation():
    """The deadline ends the wait but leaves the operation pending."""
    operation = PendingOperation("create firewall rule r")

    started = time.monotonic()
    result = await operation.wait(0.1)
    elapsed = time.monotonic() - started

    assert result.is_timed_out
    assert result.error is None
    assert 0.09 <= elapsed < 1.0
    assert operation.done is False

    # The provider can still finish it afterwards
    assert operation.succeed() is True
    assert operation.done is True


@pytest.mark.asyncio
async def test_late_completion_is_logged(caplog):
    """An outcome arriving after the deadline is logged as a warning."""
    operation = PendingOperation("create firewall rule late-rule")
    await operation.wait(0.01)

    with caplog.at_level(logging.WARNING, logger="core.domain.value_objects.operation"):
        operation.fail(FirewallRuleOperationError("boom"))
        await asyncio.sleep(0)

    assert any("late-rule" in record.getMessage() for record in caplog.records)
    assert any("boom" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_completion_in_time_is_not_logged(caplog):
    """No warning when the waiter saw the outcome."""
    operation = PendingOperation("create firewall rule r")
    operation.succeed()

    with caplog.at_level(logging.WARNING, logger="core.domain.value_objects.operation"):
        result = await operation.wait(1)
        await asyncio.sleep(0)

    assert result.is_ok
    assert caplog.records == []


@pytest.mark.asyncio
async def test_operation_resolves_only_once():
    """The first resolution wins."""
    operation = PendingOperation()

    assert operation.succeed() is True
    assert operation.fail(RuntimeError("too late")) is False

    result = await operation.wait(1)
    assert result.is_ok


@pytest.mark.asyncio
async def test_resolved_constructor():
    """Pre-resolved operations report their outcome immediately."""
    ok = PendingOperation.resolved("delete firewall rule r")
    failed = PendingOperation.resolved("delete firewall rule r", error=RuntimeError("nope"))

    assert (await ok.wait(0.01)).is_ok
    failed_result = await failed.wait(0.01)
    assert failed_result.status is OperationStatus.FAILED
    assert str(failed_result.error) == "nope"


@pytest.mark.asyncio
async def test_waiter_cancellation_propagates():
    """Cancelling the waiting task is not reported as an operation outcome."""
    operation = PendingOperation()
    waiter = asyncio.create_task(operation.wait(5))
    await asyncio.sleep(0.01)

    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    assert operation.done is False
