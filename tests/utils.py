"""Test utilities and helper functions.

Created: 2026-10-19
"""

import os
from collections import deque
from datetime import datetime
from typing import Iterable, List, Optional

from ffm.core.models import Entry, EntryKind, Listing
from ffm.core.navigation import Event


def create_test_entry(name: str, **overrides) -> Entry:
    """Factory for creating entries without touching the filesystem.

    Example:
        entry = create_test_entry("big.bin", size_bytes=4096)
    """
    defaults = {
        "name": name,
        "kind": EntryKind.FILE,
        "size_bytes": 0,
        "modified_at": datetime(2024, 1, 1, 12, 0),
        "absolute_path": f"/tmp/{name}",
        "display_label": "     0 B  |  test",
    }
    defaults.update(overrides)
    return Entry(**defaults)


def create_test_listing(entries: Iterable[Entry], directory: str = "/tmp") -> Listing:
    return Listing(directory=directory, entries=list(entries))


class FakeDisplay:
    """In-memory display adapter that records what the navigator asks of it."""

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self.events = deque(events or [])
        self.renders: List[Listing] = []
        self.index = 0
        self.teardown_count = 0

    @property
    def listing(self) -> Optional[Listing]:
        return self.renders[-1] if self.renders else None

    def render(self, listing: Listing) -> None:
        self.renders.append(listing)
        self.index = 0

    def move_selection(self, delta: int) -> int:
        if self.listing is None or len(self.listing) == 0:
            return 0
        self.index = max(0, min(self.index + delta, len(self.listing) - 1))
        return self.index

    def current_selection(self) -> Optional[Entry]:
        if self.listing is None or len(self.listing) == 0:
            return None
        return self.listing[self.index]

    def select(self, name: str) -> None:
        """Put the cursor on the entry with the given name."""
        self.index = self.listing.names().index(name)

    def poll_event(self) -> Event:
        return self.events.popleft()

    def teardown(self) -> None:
        self.teardown_count += 1


def names_on_disk(directory) -> set:
    """Entry names straight from the filesystem, for comparison."""
    return set(os.listdir(directory))
