from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class GoogleComputeSettings(BaseSettings):
    """
    Google Compute Engine API settings.
    Loaded from the environment / .env with exact variable name matching.
    """

    project_id: str = Field(default="", alias="GCE_PROJECT_ID")
    access_token: str = Field(default="", alias="GCE_ACCESS_TOKEN")
    api_base_url: str = Field(
        default="https://compute.googleapis.com/compute/v1", alias="GCE_API_BASE_URL"
    )
    poll_interval: float = Field(default=2.0, alias="GCE_POLL_INTERVAL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }
