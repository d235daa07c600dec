"""Domain value objects."""

from .operation import OperationResult, PendingOperation

__all__ = [
    "OperationResult",
    "PendingOperation",
]
