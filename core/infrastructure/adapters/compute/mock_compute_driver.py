"""
Mock Compute Driver Implementation.

Simulates the provider's firewall API in memory for tests and demos.
"""
import asyncio
import logging
from typing import Callable, Optional

from core.application.interfaces import IComputeDriver
from core.domain.entities import FirewallRule
from core.domain.errors import FirewallRuleOperationError
from core.domain.value_objects.operation import PendingOperation


logger = logging.getLogger(__name__)

CREATE = "create"
DELETE = "delete"


class MockComputeDriver(IComputeDriver):
    """
    In-memory firewall API.
    
    Operations resolve from a background task after ``delay`` seconds, the
    way a provider completes work after accepting a request. Failures can be
    injected per action (``"create"`` / ``"delete"``):
    
    - ``fail_submission``: the request is rejected immediately
    - ``fail_operation``: the request is accepted, the operation fails
    - ``hold``: the operation stays pending until ``release`` is called
    """
    
    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.rules: dict[str, FirewallRule] = {}
        self.calls: list[tuple[str, str]] = []
        self._submission_errors: dict[str, Exception] = {}
        self._operation_errors: dict[str, Exception] = {}
        self._held_actions: set[str] = set()
        self._held: list[tuple[str, PendingOperation, Callable[[], Optional[Exception]]]] = []
        self._tasks: set[asyncio.Task] = set()
    
    def fail_submission(self, action: str, error: Exception) -> None:
        self._submission_errors[action] = error
    
    def fail_operation(self, action: str, error: Exception) -> None:
        self._operation_errors[action] = error
    
    def hold(self, action: str) -> None:
        self._held_actions.add(action)
    
    def release(self, action: Optional[str] = None) -> int:
        """
        Complete held operations, as the provider eventually would.
        
        Args:
            action: Only release operations of this action
        
        Returns:
            Number of operations released
        """
        released = 0
        remaining = []
        for held_action, operation, apply in self._held:
            if action is not None and held_action != action:
                remaining.append((held_action, operation, apply))
                continue
            self._resolve(held_action, operation, apply)
            released += 1
        self._held = remaining
        return released
    
    def calls_for(self, action: str) -> list[str]:
        return [name for a, name in self.calls if a == action]
    
    async def create_firewall_rule(self, rule: FirewallRule) -> PendingOperation:
        self.calls.append((CREATE, rule.name))
        if CREATE in self._submission_errors:
            raise self._submission_errors[CREATE]
        
        def apply() -> Optional[Exception]:
            if rule.name in self.rules:
                return FirewallRuleOperationError(
                    f"The resource '{rule.name}' already exists", errors=["alreadyExists"]
                )
            self.rules[rule.name] = rule
            return None
        
        return self._start(CREATE, f"create firewall rule {rule.name}", apply)
    
    async def delete_firewall_rule(self, name: str) -> PendingOperation:
        self.calls.append((DELETE, name))
        if DELETE in self._submission_errors:
            raise self._submission_errors[DELETE]
        
        def apply() -> Optional[Exception]:
            if self.rules.pop(name, None) is None:
                return FirewallRuleOperationError(
                    f"The resource '{name}' was not found", errors=["notFound"]
                )
            return None
        
        return self._start(DELETE, f"delete firewall rule {name}", apply)
    
    def _start(self, action: str, description: str, apply) -> PendingOperation:
        operation = PendingOperation(description)
        if action in self._held_actions:
            self._held.append((action, operation, apply))
            return operation
        
        task = asyncio.create_task(self._complete_later(action, operation, apply))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return operation
    
    async def _complete_later(self, action: str, operation: PendingOperation, apply) -> None:
        await asyncio.sleep(self.delay)
        self._resolve(action, operation, apply)
    
    def _resolve(self, action: str, operation: PendingOperation, apply) -> None:
        error = self._operation_errors.get(action)
        if error is None:
            error = apply()
        if error is None:
            operation.succeed()
        else:
            logger.info(f"Mock {operation.description} failed: {error}")
            operation.fail(error)
