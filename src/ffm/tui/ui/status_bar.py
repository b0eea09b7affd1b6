"""Status bar widget for ffm.

Shows the current directory, the quit hint and the active sort mode.

Modified: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive

from ...core.models import SortMode


DEFAULT_HINTS = "Press q to quit  ?:help  a:name sort  s:size sort"


class StatusBar(Widget):
    """Two-line footer: current directory above, hints and position below."""

    DEFAULT_CSS = """
    StatusBar {
        height: 2;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar .status-path {
        width: 100%;
        height: 1;
        padding: 0 1;
        text-style: bold;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-hints {
        width: 2fr;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }
    """

    # Reactive properties
    directory = reactive("")
    position_text = reactive("")

    def __init__(self, *args, show_hints: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.show_hints = show_hints
        self.sort_mode: Optional[SortMode] = None
        self.path_widget: Optional[Static] = None
        self.hints_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        self.path_widget = Static("", classes="status-path", markup=False)
        yield self.path_widget

        with Horizontal():
            self.hints_widget = Static("", classes="status-hints", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.hints_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()
        if self.directory and self.path_widget:
            self.path_widget.update(f"Current dir: {self.directory}")

    def update_location(self, directory: str, sort_mode: Optional[SortMode], total: int) -> None:
        """Show a freshly rendered listing's directory and sort mode.

        Args:
            directory: Canonical path being listed
            sort_mode: Sort mode applied to the listing
            total: Number of entries
        """
        self.directory = directory
        self.sort_mode = sort_mode

        if self.path_widget:
            self.path_widget.update(f"Current dir: {directory}")

        self.update_position(0 if total == 0 else 1, total)

    def update_position(self, index: int, total: int) -> None:
        """Show cursor position and sort mode on the right."""
        sort_label = f"{self.sort_mode.value} sort" if self.sort_mode else ""
        self.position_text = f"{index}/{total}"

        if self.right_widget:
            self.right_widget.update(f"{sort_label}  {self.position_text}".strip())

    def update_hints(self) -> None:
        """Show the full hint line, or only the quit hint when hints are off."""
        hints = DEFAULT_HINTS if self.show_hints else "Press q to quit"

        if self.hints_widget:
            self.hints_widget.update(hints)
