"""
Mock UI Implementation.

Records output for tests and demos.
"""
import logging

from core.application.interfaces import IUi


logger = logging.getLogger(__name__)


class MockUi(IUi):
    """
    Mock implementation of the build UI.
    
    Keeps every line as a ``(kind, text)`` tuple where kind is ``say``,
    ``message`` or ``error``.
    """
    
    def __init__(self):
        self.outputs: list[tuple[str, str]] = []
    
    def say(self, message: str) -> None:
        self._record("say", message)
    
    def message(self, message: str) -> None:
        self._record("message", message)
    
    def error(self, message: str) -> None:
        self._record("error", message)
    
    def _record(self, kind: str, text: str) -> None:
        self.outputs.append((kind, text))
        logger.debug(f"[{kind}] {text}")
    
    @property
    def errors(self) -> list[str]:
        """Error lines only."""
        return [text for kind, text in self.outputs if kind == "error"]
    
    def texts(self, kind: str) -> list[str]:
        """All lines of one kind."""
        return [text for k, text in self.outputs if k == kind]
    
    def clear(self) -> None:
        """Clear recorded output (for testing)."""
        self.outputs.clear()
