"""
Pending remote operations.

A driver hands back a ``PendingOperation`` as soon as the provider accepts a
request. Whoever issued the request awaits it once with a deadline and gets
an ``OperationResult`` back.

The deadline only bounds how long the caller observes the operation. It never
cancels the remote work: an operation that times out locally may still finish
(or fail) on the provider side afterwards. Such late outcomes are logged so an
orphaned resource can be traced.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from core.domain.enums.operation_status import OperationStatus
from core.domain.errors import FirewallRuleOperationError


logger = logging.getLogger(__name__)

Timeout = Union[timedelta, float, int]


@dataclass(frozen=True)
class OperationResult:
    """Tagged outcome of waiting on a ``PendingOperation``."""

    status: OperationStatus
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(status=OperationStatus.OK)

    @classmethod
    def failed(cls, error: BaseException) -> "OperationResult":
        return cls(status=OperationStatus.FAILED, error=error)

    @classmethod
    def timed_out(cls) -> "OperationResult":
        return cls(status=OperationStatus.TIMED_OUT)

    @property
    def is_ok(self) -> bool:
        return self.status is OperationStatus.OK

    @property
    def is_timed_out(self) -> bool:
        return self.status is OperationStatus.TIMED_OUT


def _to_seconds(timeout: Timeout) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class PendingOperation:
    """
    Completion handle for an asynchronous remote operation.

    Resolved exactly once by the driver through ``succeed()`` or ``fail()``,
    typically from a background task or callback. Must be created while an
    event loop is running.
    """

    def __init__(self, description: str = "operation"):
        self.description = description
        self._future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._abandoned = False
        self._future.add_done_callback(self._on_done)

    @classmethod
    def resolved(cls, description: str = "operation", error: Optional[BaseException] = None) -> "PendingOperation":
        """Build an operation that has already completed."""
        operation = cls(description)
        if error is None:
            operation.succeed()
        else:
            operation.fail(error)
        return operation

    @property
    def done(self) -> bool:
        return self._future.done()

    def succeed(self) -> bool:
        """
        Mark the operation successful.

        Returns:
            False if the operation had already been resolved
        """
        if self._future.done():
            logger.debug(f"Ignoring second resolution of {self.description}")
            return False
        self._future.set_result(None)
        return True

    def fail(self, error: BaseException) -> bool:
        """
        Mark the operation failed with a provider error.

        Returns:
            False if the operation had already been resolved
        """
        if self._future.done():
            logger.debug(f"Ignoring second resolution of {self.description}: {error}")
            return False
        self._future.set_exception(error)
        return True

    async def wait(self, timeout: Timeout) -> OperationResult:
        """
        Wait for completion or for ``timeout`` to elapse, whichever is first.

        Args:
            timeout: Deadline as a timedelta or seconds

        Returns:
            OK, FAILED with the provider error, or TIMED_OUT
        """
        try:
            await asyncio.wait_for(asyncio.shield(self._future), timeout=_to_seconds(timeout))
        except asyncio.TimeoutError:
            self._abandoned = True
            return OperationResult.timed_out()
        except asyncio.CancelledError:
            if not self._future.cancelled():
                raise
            return OperationResult.failed(
                FirewallRuleOperationError(f"{self.description} was cancelled")
            )
        except Exception as exc:
            return OperationResult.failed(exc)
        return OperationResult.ok()

    def _on_done(self, future: asyncio.Future) -> None:
        if future.cancelled():
            return
        # Retrieving the exception here keeps asyncio from reporting it as
        # never retrieved when nobody is waiting anymore.
        error = future.exception()
        if not self._abandoned:
            return
        if error is None:
            logger.warning(f"{self.description} succeeded after its wait deadline had passed")
        else:
            logger.warning(f"{self.description} failed after its wait deadline had passed: {error}")

    def __repr__(self) -> str:
        state = "done" if self.done else "pending"
        return f"PendingOperation({self.description!r}, {state})"
