"""Orchestration layer - runs build steps with eventing."""

from .bus import EventBusProtocol, InMemoryEventBus
from .events import Event, EventMetadata
from .models import StepResult, WorkflowResult
from .orchestrator import Orchestrator

__all__ = [
    "Event",
    "EventBusProtocol",
    "EventMetadata",
    "InMemoryEventBus",
    "Orchestrator",
    "StepResult",
    "WorkflowResult",
]


def create_default_orchestrator(name: str = "build") -> Orchestrator:
    """Create an orchestrator with an in-memory event bus.

    Args:
        name: Workflow name

    Returns:
        Orchestrator instance
    """
    return Orchestrator(event_bus=InMemoryEventBus(), name=name)
