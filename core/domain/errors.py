"""
Domain errors.

Failures raised while provisioning temporary build resources.
"""
from typing import Optional


class ImageForgeError(Exception):
    """Base class for imageforge errors."""


class FirewallRuleSubmissionError(ImageForgeError):
    """The driver rejected a request before any remote operation started."""


class FirewallRuleOperationError(ImageForgeError):
    """The provider reported that a remote operation failed."""

    def __init__(self, message: str, operation: Optional[str] = None, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.operation = operation
        self.errors = list(errors or [])


class OperationTimeoutError(ImageForgeError, TimeoutError):
    """
    The wait deadline elapsed before the operation completed.

    The remote operation is not cancelled and may still complete.
    """


class FirewallRuleError(ImageForgeError):
    """
    Descriptive failure of a firewall rule action.

    Raised (or stored in the build state) with the underlying cause chained
    as ``__cause__``.
    """

    def __init__(self, message: str, action: str, rule_name: str):
        super().__init__(message)
        self.action = action
        self.rule_name = rule_name


__all__ = [
    "ImageForgeError",
    "FirewallRuleSubmissionError",
    "FirewallRuleOperationError",
    "OperationTimeoutError",
    "FirewallRuleError",
]
