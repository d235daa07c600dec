"""
Console UI Implementation.

Writes build output through the logging module.
"""
import logging
from typing import Optional

from core.application.interfaces import IUi


class ConsoleUi(IUi):
    """
    Logging-backed UI.
    
    Progress lines are prefixed with ``==>`` and detail lines are indented
    beneath them, so a build reads as a list of actions.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None, prefix: str = ""):
        """
        Initialize console UI.
        
        Args:
            logger: Logger to write to (defaults to ``imageforge.ui``)
            prefix: Optional build name shown before every line
        """
        self.logger = logger or logging.getLogger("imageforge.ui")
        self.prefix = f"{prefix}: " if prefix else ""
    
    def say(self, message: str) -> None:
        self.logger.info(f"==> {self.prefix}{message}")
    
    def message(self, message: str) -> None:
        for line in message.splitlines() or [""]:
            self.logger.info(f"    {self.prefix}{line}")
    
    def error(self, message: str) -> None:
        self.logger.error(f"==> {self.prefix}{message}")
