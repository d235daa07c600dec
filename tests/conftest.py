"""Shared fixtures for the imageforge test suite."""

import pytest

from core.application.state import BuildState
from core.infrastructure.adapters.compute import MockComputeDriver
from core.infrastructure.adapters.ui import MockUi
from core.settings import BuildSettings


@pytest.fixture
def settings() -> BuildSettings:
    """Build settings with a short deadline."""
    return BuildSettings(
        instance_name="packer-test",
        network="build-net",
        tags=["packer", "ssh"],
        state_timeout=0.5,
    )


@pytest.fixture
def mock_driver() -> MockComputeDriver:
    return MockComputeDriver()


@pytest.fixture
def mock_ui() -> MockUi:
    return MockUi()


@pytest.fixture
def build_state(settings, mock_driver, mock_ui) -> BuildState:
    """Fresh shared state wired to the mock driver and UI."""
    return BuildState(config=settings, driver=mock_driver, ui=mock_ui)
