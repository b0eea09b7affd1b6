"""
Sort engine for ffm.

Modified: 2026-10-19
"""

import os

from ffm.core.models import Entry, Listing, SortMode


def name_key(entry: Entry) -> bytes:
    """Byte-wise ordinal key; never locale-collated."""
    return os.fsencode(entry.name)


def size_key(entry: Entry) -> int:
    return entry.size_bytes


def sort_listing(listing: Listing, mode: SortMode) -> Listing:
    """
    Order a listing in place.

    BY_NAME sorts ascending by raw name bytes. BY_SIZE sorts largest first;
    the sort is stable, so entries of equal size keep their relative order.
    Files and directories are not grouped.

    Returns:
        The same Listing, for chaining
    """
    if mode == SortMode.BY_NAME:
        listing.entries.sort(key=name_key)
    elif mode == SortMode.BY_SIZE:
        listing.entries.sort(key=size_key, reverse=True)
    else:
        raise ValueError(f"Unsupported sort mode: {mode!r}")

    listing.sort_mode = mode
    return listing
