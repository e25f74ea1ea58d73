"""Configuration for activity-line: paths, runtime settings and the config file."""

from .loader import load_activity_config, save_activity_config
from .settings import ActivityLineSettings, get_settings

__all__ = [
    "ActivityLineSettings",
    "get_settings",
    "load_activity_config",
    "save_activity_config",
]
