# Settings package
from core.settings.modules import AppSettings, BuildSettings, GoogleComputeSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "BuildSettings", "GoogleComputeSettings"]
