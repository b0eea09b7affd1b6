"""
Configuration management for ffm.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/ffm/config.yaml)
- Environment variables

Modified: 2026-10-19
"""

from ffm.config.settings import (
    Settings,
    BehaviorSettings,
    DisplaySettings,
    LoggingSettings,
    get_config_dir,
    get_cache_dir,
)

__all__ = [
    "Settings",
    "BehaviorSettings",
    "DisplaySettings",
    "LoggingSettings",
    "get_config_dir",
    "get_cache_dir",
]
