"""
Core data models for ffm.

An Entry is one filesystem object inside a directory snapshot; a Listing is
the ordered set of Entries for that snapshot. Both are rebuilt on every
reload rather than updated in place.

Modified: 2026-10-19
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


BROKEN_SYMLINK_LABEL = "broken symlink"


class EntryKind(Enum):
    """Type of a directory entry, taken from its own (non-followed) metadata."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class SortMode(Enum):
    """Ordering strategy applied to a Listing."""

    BY_NAME = "name"
    BY_SIZE = "size"

    @classmethod
    def from_string(cls, value: str) -> "SortMode":
        """Parse a config/CLI value such as 'name' or 'size'."""
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized or mode.name.lower() == normalized:
                return mode
        raise ValueError(f"Unknown sort mode: {value!r}")


@dataclass(frozen=True)
class Entry:
    """
    One filesystem object within a Listing.

    The display label is precomputed when the entry is resolved so rendering
    never touches the filesystem.
    """

    name: str
    kind: EntryKind
    size_bytes: int
    modified_at: datetime
    absolute_path: str  # empty when the symlink target could not be resolved
    display_label: str
    target_is_dir: bool = False

    @property
    def is_broken(self) -> bool:
        """True for a symlink whose target could not be resolved."""
        return self.absolute_path == ""

    @property
    def is_navigable(self) -> bool:
        """Whether confirming on this entry moves into it."""
        if self.kind == EntryKind.DIRECTORY:
            return True
        if self.kind == EntryKind.SYMLINK:
            return not self.is_broken and self.target_is_dir
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (used for debug logging and tests)."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "size_bytes": self.size_bytes,
            "modified_at": self.modified_at.isoformat(),
            "absolute_path": self.absolute_path,
            "display_label": self.display_label,
            "target_is_dir": self.target_is_dir,
        }


@dataclass
class Listing:
    """
    Ordered snapshot of one directory's entries.

    Order is whatever the last sort produced; before sorting it follows
    directory enumeration and must not be relied upon.
    """

    directory: str
    entries: List[Entry] = field(default_factory=list)
    sort_mode: Optional[SortMode] = None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def append(self, entry: Entry) -> None:
        """Add an entry while the listing is being built."""
        self.entries.append(entry)

    def names(self) -> List[str]:
        """Entry names in current order."""
        return [entry.name for entry in self.entries]

    def find(self, name: str) -> Optional[Entry]:
        """Look up an entry by name."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def sort(self, mode: SortMode) -> "Listing":
        """Order entries in place by the given mode."""
        from ffm.core.sorting import sort_listing

        return sort_listing(self, mode)
