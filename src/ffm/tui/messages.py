"""Custom Textual messages for ffm.

Defines custom messages for communication between TUI components.

Modified: 2026-10-19
"""

from textual.message import Message

from ..core.models import Entry


class EntryHighlighted(Message):
    """Message sent when the selection cursor lands on an entry."""

    def __init__(self, entry: Entry, index: int, total: int):
        super().__init__()
        self.entry = entry
        self.index = index
        self.total = total
