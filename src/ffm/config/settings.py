"""
Configuration management for ffm.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-19
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from ffm.core.exceptions import ConfigurationError
from ffm.core.models import SortMode


@dataclass
class BehaviorSettings:
    """Behavior settings."""

    default_sort: str = "name"  # name, size

    @property
    def sort_mode(self) -> SortMode:
        """Parsed default sort mode."""
        try:
            return SortMode.from_string(self.default_sort)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e


@dataclass
class DisplaySettings:
    """Display settings."""

    time_format: Optional[str] = None  # strftime format, None = locale default
    show_hints: bool = True


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[str] = None  # None = ffm.log in the cache directory

    @property
    def path(self) -> Path:
        """Resolved log file path."""
        if self.file:
            return Path(self.file).expanduser()
        return get_cache_dir() / "ffm.log"


@dataclass
class Settings:
    """Main settings container."""

    behavior: BehaviorSettings = field(default_factory=BehaviorSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/ffm/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is not valid YAML or a value is invalid
        """
        settings = cls()

        if config_path is None:
            config_path = get_config_dir() / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Config file {config_path} must contain a mapping")

            # Behavior settings
            if "behavior" in config_data:
                behavior = config_data["behavior"] or {}
                settings.behavior = BehaviorSettings(
                    default_sort=behavior.get("default_sort", "name"),
                )

            # Display settings
            if "display" in config_data:
                display = config_data["display"] or {}
                settings.display = DisplaySettings(
                    time_format=display.get("time_format"),
                    show_hints=display.get("show_hints", True),
                )

            # Logging settings
            if "logging" in config_data:
                log = config_data["logging"] or {}
                settings.logging = LoggingSettings(
                    level=log.get("level", "WARNING"),
                    file=log.get("file"),
                )

        # Override with environment variables
        sort_env = os.getenv("FFM_SORT")
        if sort_env:
            settings.behavior.default_sort = sort_env

        time_format_env = os.getenv("FFM_TIME_FORMAT")
        if time_format_env:
            settings.display.time_format = time_format_env

        log_level_env = os.getenv("FFM_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env

        log_file_env = os.getenv("FFM_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        settings.validate()
        return settings

    def validate(self) -> None:
        """Check values that cannot be caught by the dataclass types."""
        # Raises ConfigurationError on an unknown mode
        self.behavior.sort_mode

        if not isinstance(self.logging.level, str) or self.logging.level.upper() not in (
            "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
        ):
            raise ConfigurationError(f"Invalid log level: {self.logging.level!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "behavior": {
                "default_sort": self.behavior.default_sort,
            },
            "display": {
                "time_format": self.display.time_format,
                "show_hints": self.display.show_hints,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "ffm"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "ffm"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
