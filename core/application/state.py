"""Shared state passed between build steps."""

from dataclasses import dataclass, field
from typing import Optional

from core.application.interfaces import IComputeDriver, IUi
from core.settings.modules.build_settings import BuildSettings


@dataclass
class BuildState:
    """
    Mutable state shared by every step of one build run.

    Owned by the orchestrator and lent to each step in turn; only one step
    touches it at a time. Steps own their fields and leave the rest alone.
    ``metadata`` holds values of steps that have no dedicated field.
    """

    config: BuildSettings
    driver: IComputeDriver
    ui: IUi
    firewall_rule_name: str = ""
    error: Optional[Exception] = None
    metadata: dict[str, object] = field(default_factory=dict)
