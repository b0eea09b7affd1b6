"""
Custom exceptions for ffm.

Every filesystem failure the core cannot recover from is raised as an
FfmError subclass; the top level decides to tear down and exit.

Modified: 2026-10-19
"""


class FfmError(Exception):
    """Base exception for all ffm errors."""

    pass


class FilesystemError(FfmError):
    """Base for failures tied to a filesystem path."""

    def __init__(self, path: str, reason: str = ""):
        message = f"{path}: {reason}" if reason else path
        super().__init__(message)
        self.path = path
        self.reason = reason


class DirectoryOpenError(FilesystemError):
    """Raised when a directory cannot be opened for listing."""

    pass


class MetadataError(FilesystemError):
    """Raised when metadata lookup (lstat) fails for a listed entry."""

    pass


class PathResolutionError(FilesystemError):
    """Raised when a path cannot be resolved to its canonical form."""

    pass


class ConfigurationError(FfmError):
    """Raised when configuration is invalid or missing."""

    pass
