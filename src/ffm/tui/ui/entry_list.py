"""Entry list widget for ffm.

Single-column selectable list of directory entries. The widget owns the
selection cursor and viewport; the navigator only asks it to move and to
report the highlighted entry.

Modified: 2026-10-19
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static
from textual.reactive import reactive

from ...core.models import Entry, Listing
from ..messages import EntryHighlighted


MAX_NAME_WIDTH = 48


class EntryItem(Static):
    """One row: entry name followed by its size/timestamp label."""

    def __init__(self, entry: Entry, name_width: int, **kwargs):
        super().__init__(format_row(entry, name_width), markup=False, **kwargs)
        self.entry = entry


def format_row(entry: Entry, name_width: int) -> str:
    """Pad the name so labels line up in a column."""
    return f"{entry.name:<{name_width}}  {entry.display_label}"


def item_classes(entry: Entry) -> List[str]:
    classes = ["entry-item", f"kind-{entry.kind.value}"]
    if entry.is_broken:
        classes.append("broken")
    return classes


class EntryList(ScrollableContainer, inherit_bindings=False):
    """Scrollable list of the entries in the current listing.

    Key handling lives in the app so every key goes through the navigator;
    the container's own scrolling bindings are not inherited.
    """

    DEFAULT_CSS = """
    EntryList {
        width: 100%;
        height: 1fr;
        padding: 0 1;
    }

    EntryList > .entry-item {
        width: 100%;
        height: 1;
    }

    EntryList > .kind-directory {
        color: $accent;
        text-style: bold;
    }

    EntryList > .kind-symlink {
        color: $secondary;
    }

    EntryList > .broken {
        color: $error;
    }

    EntryList > .entry-item.selected {
        background: $primary;
        color: $text;
    }

    EntryList > .loading {
        width: 100%;
        height: 100%;
        content-align: center middle;
    }
    """

    can_focus = False

    selected_index = reactive(0)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.listing: Optional[Listing] = None
        self._rows: List[EntryItem] = []

    def compose(self) -> ComposeResult:
        """Initial composition."""
        yield Static("Loading...", classes="loading")

    @property
    def entries(self) -> List[Entry]:
        if self.listing is None:
            return []
        return self.listing.entries

    def set_listing(self, listing: Listing) -> None:
        """Replace the displayed listing and put the cursor on the first entry."""
        self.listing = listing
        self.set_reactive(EntryList.selected_index, 0)
        self.refresh_display()
        self.scroll_home(animate=False)
        if self.entries:
            self.post_message(EntryHighlighted(self.entries[0], 0, len(self.entries)))

    def refresh_display(self) -> None:
        """Rebuild the rows for the current listing."""
        self.remove_children()
        self._rows = []

        if not self.entries:
            self.mount(Static("Empty directory", classes="loading"))
            return

        name_width = min(max(len(e.name) for e in self.entries), MAX_NAME_WIDTH)
        for i, entry in enumerate(self.entries):
            classes = item_classes(entry)
            if i == self.selected_index:
                classes.append("selected")
            self._rows.append(EntryItem(entry, name_width, classes=" ".join(classes)))

        self.mount_all(self._rows)

    def watch_selected_index(self, old_value: int, new_value: int) -> None:
        """React to selection changes."""
        if 0 <= old_value < len(self._rows):
            self._rows[old_value].remove_class("selected")
        if 0 <= new_value < len(self._rows):
            self._rows[new_value].add_class("selected")
            self.post_message(
                EntryHighlighted(self.entries[new_value], new_value, len(self.entries))
            )

    def move_selection(self, delta: int) -> int:
        """Move selection up or down, clamped to the listing."""
        if not self.entries:
            return 0

        new_index = self.selected_index + delta
        new_index = max(0, min(new_index, len(self.entries) - 1))
        self.selected_index = new_index

        # Scroll to show selected item
        if 0 <= new_index < len(self._rows):
            self.scroll_to_widget(self._rows[new_index], animate=False)

        return new_index

    def get_selected_entry(self) -> Optional[Entry]:
        """Get the currently selected entry."""
        if 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None
