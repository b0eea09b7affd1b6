"""
Entry resolver for ffm.

Turns one directory entry name into a fully populated Entry: lstat metadata,
human-readable size, locale timestamp, canonical path and broken-link
detection.

Modified: 2026-10-19
"""

import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Optional

from ffm.core.exceptions import MetadataError, PathResolutionError
from ffm.core.models import BROKEN_SYMLINK_LABEL, Entry, EntryKind


logger = logging.getLogger(__name__)

SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
DIRECTORY_MARKER = "<DIR>"
DEFAULT_TIME_FORMAT = "%c"


def kind_from_mode(mode: int) -> EntryKind:
    """Map an lstat st_mode to an EntryKind."""
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def format_size(size_bytes: int, kind: EntryKind = EntryKind.FILE) -> str:
    """
    Format a byte count with the largest unit keeping the value below 1024.

    The number of decimals equals the number of scaling steps taken, so
    1023 -> "1023 B", 1024 -> "1.0 kB" and 1048576 -> "1.00 MB".
    Directories show a fixed marker instead of a size.

    Args:
        size_bytes: Raw byte count
        kind: Entry kind; directories are not sized

    Returns:
        Formatted size string
    """
    if kind == EntryKind.DIRECTORY:
        return DIRECTORY_MARKER

    value = float(size_bytes)
    step = 0
    while value >= 1024 and step < len(SIZE_UNITS) - 1:
        value /= 1024
        step += 1

    return f"{value:.{step}f} {SIZE_UNITS[step]}"


def format_timestamp(modified_at: datetime, time_format: Optional[str] = None) -> str:
    """Format a modification time; defaults to the locale's date and time."""
    return modified_at.strftime(time_format or DEFAULT_TIME_FORMAT)


def format_label(size_text: str, timestamp: str) -> str:
    """Build the size/timestamp column shown next to an entry name."""
    return f"{size_text:>8}  |  {timestamp}"


def resolve_entry(
    parent_directory: str,
    entry_name: str,
    time_format: Optional[str] = None,
) -> Entry:
    """
    Build an Entry for one name inside parent_directory.

    Args:
        parent_directory: Directory containing the entry
        entry_name: Base name as returned by directory enumeration
        time_format: Optional strftime format for the timestamp

    Returns:
        Populated Entry. A symlink whose target cannot be resolved comes back
        with an empty absolute_path and the broken symlink label.

    Raises:
        ValueError: If entry_name is the '.' or '..' pseudo-entry
        MetadataError: If lstat fails
        PathResolutionError: If a non-symlink cannot be canonicalized
    """
    if entry_name in (os.curdir, os.pardir):
        raise ValueError(f"Cannot resolve pseudo-entry {entry_name!r}")

    path = os.path.join(parent_directory, entry_name)

    try:
        st = os.lstat(path)
    except OSError as e:
        raise MetadataError(path, e.strerror or str(e)) from e

    kind = kind_from_mode(st.st_mode)
    modified_at = datetime.fromtimestamp(st.st_mtime)
    label = format_label(
        format_size(st.st_size, kind),
        format_timestamp(modified_at, time_format),
    )

    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        if kind != EntryKind.SYMLINK:
            raise PathResolutionError(path, str(e)) from e

        logger.debug(f"Broken symlink: {path}")
        return Entry(
            name=entry_name,
            kind=kind,
            size_bytes=st.st_size,
            modified_at=modified_at,
            absolute_path="",
            display_label=BROKEN_SYMLINK_LABEL,
        )

    return Entry(
        name=entry_name,
        kind=kind,
        size_bytes=st.st_size,
        modified_at=modified_at,
        absolute_path=str(resolved),
        display_label=label,
        target_is_dir=resolved.is_dir(),
    )
