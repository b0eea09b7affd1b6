"""
Directory lister for ffm.

Enumerates a directory and resolves every entry except the '.' and '..'
pseudo-entries. Order follows enumeration; sorting is a separate step.

Modified: 2026-10-19
"""

import logging
import os
from typing import Optional

from ffm.core.exceptions import DirectoryOpenError
from ffm.core.models import Listing
from ffm.core.resolver import resolve_entry


logger = logging.getLogger(__name__)


def list_directory(directory_path: str, time_format: Optional[str] = None) -> Listing:
    """
    Build an unsorted Listing for directory_path.

    Args:
        directory_path: Directory to enumerate; callers pass a canonical path
        time_format: Optional strftime format forwarded to the resolver

    Returns:
        Listing with one Entry per directory entry

    Raises:
        DirectoryOpenError: If the directory cannot be opened
        MetadataError: If an entry's metadata cannot be read
        PathResolutionError: If a non-symlink entry cannot be canonicalized
    """
    listing = Listing(directory=directory_path)

    try:
        with os.scandir(directory_path) as entries:
            for dir_entry in entries:
                if dir_entry.name in (os.curdir, os.pardir):
                    continue
                listing.append(
                    resolve_entry(directory_path, dir_entry.name, time_format)
                )
    except OSError as e:
        raise DirectoryOpenError(directory_path, e.strerror or str(e)) from e

    logger.debug(f"Listed {len(listing)} entries in {directory_path}")
    return listing
