from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.build_settings import BuildSettings
from core.settings.modules.google_settings import GoogleComputeSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    build: BuildSettings
    google: GoogleComputeSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        build=BuildSettings(),
        google=GoogleComputeSettings(),
    )
