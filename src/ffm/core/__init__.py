"""
Core directory-listing and navigation engine for ffm.

Nothing in this package touches the terminal; rendering goes through the
DisplayAdapter protocol in ffm.core.navigation.

Modified: 2026-10-19
"""

from ffm.core.exceptions import (
    FfmError,
    DirectoryOpenError,
    MetadataError,
    PathResolutionError,
    ConfigurationError,
)

__all__ = [
    "FfmError",
    "DirectoryOpenError",
    "MetadataError",
    "PathResolutionError",
    "ConfigurationError",
]
