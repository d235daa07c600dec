"""User-facing output adapters."""

from .console_ui import ConsoleUi
from .mock_ui import MockUi

__all__ = ["ConsoleUi", "MockUi"]
