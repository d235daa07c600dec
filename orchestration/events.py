"""Orchestration events - Event, EventMetadata."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class EventMetadata:
    """Metadata for an event."""

    run_id: str
    workflow: str
    timestamp: datetime


@dataclass
class Event:
    """Lifecycle event of a build run."""

    name: str
    payload: dict[str, object]
    metadata: EventMetadata
