"""Main ffm TUI application.

Wires the Textual widgets to the navigation engine: keys become navigator
events, and the navigator renders through TextualDisplay.

Modified: 2026-10-19
"""

import asyncio
from pathlib import Path
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Header
from textual import events

from ..core.exceptions import FfmError
from ..core.models import Entry, Listing, SortMode
from ..core.navigation import Event, NavigationState, Navigator

from .ui.entry_list import EntryList
from .ui.status_bar import StatusBar
from .messages import EntryHighlighted
from .keybindings import registry
from ..config.settings import Settings


logger = logging.getLogger(__name__)


class TextualDisplay:
    """DisplayAdapter backed by the app's EntryList and StatusBar."""

    def __init__(self, app: "FfmApp"):
        self.app = app
        self.torn_down = False

    def render(self, listing: Listing) -> None:
        self.app.entry_list.set_listing(listing)
        self.app.status_bar.update_location(listing.directory, listing.sort_mode, len(listing))
        self.app.sub_title = listing.directory

    def move_selection(self, delta: int) -> int:
        return self.app.entry_list.move_selection(delta)

    def current_selection(self) -> Optional[Entry]:
        return self.app.entry_list.get_selected_entry()

    def teardown(self) -> None:
        if self.torn_down:
            return
        self.torn_down = True
        self.app.exit(return_code=self.app.exit_code)


class FfmApp(App):
    """Main application class for ffm."""

    TITLE = "ffm"
    SUB_TITLE = ""

    CSS = """
    #main-container {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("question_mark", "help", "Help"),
    ]

    def __init__(
        self,
        start_directory: str,
        settings: Optional[Settings] = None,
        sort_mode: Optional[SortMode] = None,
    ):
        """Initialize the application.

        Args:
            start_directory: Canonical path of the first directory to list
            settings: Loaded settings (defaults if omitted)
            sort_mode: Initial sort mode, overriding the configured default
        """
        super().__init__()

        self.settings = settings or Settings()
        self.start_directory = start_directory
        self.initial_sort = sort_mode or self.settings.behavior.sort_mode

        self.navigator: Optional[Navigator] = None
        self.display_adapter: Optional[TextualDisplay] = None
        self.exit_code = 0
        self.fatal_error: Optional[FfmError] = None

        # UI components
        self.entry_list: Optional[EntryList] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        with Container(id="main-container"):
            self.entry_list = EntryList(id="entry-list")
            yield self.entry_list

        self.status_bar = StatusBar(id="status-bar", show_hints=self.settings.display.show_hints)
        yield self.status_bar

    def on_mount(self) -> None:
        """Build the navigator and show the starting directory."""
        self.display_adapter = TextualDisplay(self)
        state = NavigationState(
            current_directory=self.start_directory,
            sort_mode=self.initial_sort,
        )
        self.navigator = Navigator(
            state,
            self.display_adapter,
            time_format=self.settings.display.time_format,
        )

        try:
            self.navigator.reload_if_needed()
        except FfmError as e:
            self.abort(e)

    def navigate(self, event: Event) -> None:
        """Run one navigator event to completion."""
        if not self.navigator or self.display_adapter.torn_down:
            return

        try:
            keep_running = self.navigator.dispatch(event)
        except FfmError as e:
            self.abort(e)
            return

        if not keep_running:
            self.finish(0)

    def abort(self, error: FfmError) -> None:
        """Record a fatal error and exit with a non-zero code."""
        logger.error(f"Fatal error: {error}", exc_info=True)
        self.fatal_error = error
        self.finish(1)

    def finish(self, exit_code: int) -> None:
        """Release the listing and tear the display down once."""
        self.exit_code = exit_code
        if self.navigator:
            self.navigator.close()
        if self.display_adapter:
            self.display_adapter.teardown()
        else:
            self.exit(return_code=exit_code)

    # Action handlers

    def action_help(self) -> None:
        """Show keybinding help."""
        self.notify(registry.format_help_text(), title="Keys", timeout=8)

    async def action_quit(self) -> None:
        """Route Textual's own quit binding through the navigator."""
        self.navigate(Event.QUIT)

    # Message handlers

    def on_entry_highlighted(self, message: EntryHighlighted) -> None:
        """Keep the position indicator in sync with the cursor."""
        if self.status_bar:
            self.status_bar.update_position(message.index + 1, message.total)

    def on_resize(self, event: events.Resize) -> None:
        """Terminal resize rebuilds the listing."""
        if self.navigator:
            self.navigate(Event.RESIZE)

    def on_key(self, event: events.Key) -> None:
        """Translate keys into navigator events."""
        nav_event = registry.event_for_key(event.key)
        if nav_event == Event.UNRECOGNIZED:
            # Leave it for bindings such as help
            return

        event.stop()
        self.navigate(nav_event)


async def run_app(
    start_directory: str,
    settings: Optional[Settings] = None,
    sort_mode: Optional[SortMode] = None,
    headless: bool = False,
) -> FfmApp:
    """Run the ffm TUI application.

    Args:
        start_directory: Canonical starting directory
        settings: Loaded settings
        sort_mode: Optional initial sort mode
        headless: Run without a terminal (tests)

    Returns:
        The finished app, carrying its exit code and any fatal error
    """
    app = FfmApp(start_directory, settings=settings, sort_mode=sort_mode)
    await app.run_async(headless=headless)

    # Textual stops the app itself on an unhandled exception and only sets return_code
    if not app.exit_code and app.return_code:
        logger.error(f"Application stopped with return code {app.return_code}")
        app.exit_code = app.return_code

    return app


if __name__ == "__main__":
    asyncio.run(run_app(str(Path.cwd())))
