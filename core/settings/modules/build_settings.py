from __future__ import annotations

import re
from datetime import timedelta
from typing import Annotated
from uuid import uuid4

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_UNIT_SECONDS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration such as ``"5m"``, ``"90s"`` or ``"1h30m"``.

    A bare number is read as seconds.
    """
    text = value.strip()
    if not text:
        raise ValueError("duration must not be empty")
    try:
        return timedelta(seconds=float(text))
    except ValueError:
        pass

    position = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()
    if position != len(text):
        raise ValueError(f"invalid duration: {value!r}")
    return timedelta(seconds=seconds)


def _default_instance_name() -> str:
    return f"packer-{uuid4().hex}"


class BuildSettings(BaseSettings):
    """
    Settings for a single image build run.
    Loaded from the environment / .env with exact variable name matching.
    """

    instance_name: str = Field(default_factory=_default_instance_name, alias="INSTANCE_NAME")
    network: str = Field(default="default", alias="NETWORK")
    tags: Annotated[list[str], NoDecode] = Field(default_factory=list, alias="TAGS")
    state_timeout: timedelta = Field(default=timedelta(minutes=5), alias="STATE_TIMEOUT")
    debug: bool = Field(default=False, alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value

    @field_validator("state_timeout", mode="before")
    @classmethod
    def _parse_state_timeout(cls, value):
        if isinstance(value, str):
            return parse_duration(value)
        if isinstance(value, (int, float)):
            return timedelta(seconds=value)
        return value

    @field_validator("state_timeout")
    @classmethod
    def _positive_state_timeout(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("state_timeout must be positive")
        return value
