"""Signal a step returns to the orchestrator."""
from enum import Enum


class StepAction(str, Enum):
    """Whether the run proceeds to the next step."""

    CONTINUE = "continue"
    HALT = "halt"
