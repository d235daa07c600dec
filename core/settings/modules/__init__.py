# Settings modules
from .app_settings import AppSettings, get_app_settings
from .build_settings import BuildSettings, parse_duration
from .google_settings import GoogleComputeSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "BuildSettings",
    "GoogleComputeSettings",
    "parse_duration",
]
