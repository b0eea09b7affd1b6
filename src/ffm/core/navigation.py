"""
Navigation state machine for ffm.

NavigationState is a single context object passed to the Navigator rather
than held globally. The Navigator interprets input events, and whenever a
transition requests it, rebuilds and re-renders the listing.

Modified: 2026-10-19
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from ffm.core.exceptions import PathResolutionError
from ffm.core.lister import list_directory
from ffm.core.models import Entry, Listing, SortMode
from ffm.core.sorting import sort_listing


logger = logging.getLogger(__name__)


class Event(Enum):
    """Input events understood by the navigator."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    QUIT = "quit"
    SORT_BY_NAME = "sort_by_name"
    SORT_BY_SIZE = "sort_by_size"
    RESIZE = "resize"
    NAVIGATE_PARENT = "navigate_parent"
    UNRECOGNIZED = "unrecognized"


class DisplayAdapter(Protocol):
    """Rendering collaborator; owns the selection cursor and viewport."""

    def render(self, listing: Listing) -> None:
        """Show the ordered entries and the listing's directory."""
        ...

    def move_selection(self, delta: int) -> int:
        """Move the cursor by delta and return the new index."""
        ...

    def current_selection(self) -> Optional[Entry]:
        """Highlighted entry, or None when the listing is empty."""
        ...

    def teardown(self) -> None:
        """Release rendering resources. Called exactly once."""
        ...


class PollingDisplay(DisplayAdapter, Protocol):
    """Display that also hands out input events on request."""

    def poll_event(self) -> Event:
        """Block until the next input event."""
        ...


def canonicalize(path: str) -> str:
    """
    Resolve path to an absolute canonical form.

    Raises:
        PathResolutionError: If the path does not exist or cannot be resolved
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(path, str(e)) from e


@dataclass
class NavigationState:
    """Everything the navigator mutates while the program runs."""

    current_directory: str
    sort_mode: SortMode = SortMode.BY_NAME
    needs_reload: bool = True
    active_listing: Optional[Listing] = None
    selection_index: int = 0

    @classmethod
    def start(cls, start_path: str, sort_mode: SortMode = SortMode.BY_NAME) -> "NavigationState":
        """Create the initial state from a starting path, resolved canonically."""
        return cls(current_directory=canonicalize(start_path), sort_mode=sort_mode)


class Navigator:
    """
    Drives NavigationState from input events.

    Each dispatch runs to completion, including any reload it triggers,
    before the next event is accepted.
    """

    def __init__(
        self,
        state: NavigationState,
        display: DisplayAdapter,
        time_format: Optional[str] = None,
    ):
        """
        Initialize the navigator.

        Args:
            state: Navigation state to drive
            display: Display adapter receiving rendered listings
            time_format: Optional strftime format for entry timestamps
        """
        self.state = state
        self.display = display
        self.time_format = time_format

    def dispatch(self, event: Event) -> bool:
        """
        Apply one input event, then reload if it was requested.

        Returns:
            False when the event ends the navigation loop, True otherwise
        """
        if event == Event.QUIT:
            return False

        if event == Event.MOVE_UP:
            self.state.selection_index = self.display.move_selection(-1)
        elif event == Event.MOVE_DOWN:
            self.state.selection_index = self.display.move_selection(1)
        elif event == Event.NAVIGATE_PARENT:
            self.navigate_parent()
        elif event == Event.ENTER:
            self.enter_selection()
        elif event == Event.SORT_BY_NAME:
            self.set_sort_mode(SortMode.BY_NAME)
        elif event == Event.SORT_BY_SIZE:
            self.set_sort_mode(SortMode.BY_SIZE)
        elif event == Event.RESIZE:
            self.request_reload()

        self.reload_if_needed()
        return True

    def request_reload(self) -> None:
        self.state.needs_reload = True

    def navigate_parent(self) -> None:
        """Move to the parent directory; the parent of root is root."""
        self.state.current_directory = os.path.join(
            self.state.current_directory, os.pardir
        )
        self.request_reload()

    def enter_selection(self) -> None:
        """Move into the highlighted entry if it is a directory or a link to one."""
        entry = self.display.current_selection()
        if entry is None or not entry.is_navigable:
            return

        self.state.current_directory = entry.absolute_path
        self.request_reload()

    def set_sort_mode(self, mode: SortMode) -> None:
        """Switch sort mode; selecting the active mode does nothing."""
        if self.state.sort_mode == mode:
            return

        self.state.sort_mode = mode
        self.request_reload()

    def reload_if_needed(self) -> bool:
        """Run the reload procedure if a transition asked for it."""
        if not self.state.needs_reload:
            return False

        self.reload()
        return True

    def reload(self) -> Listing:
        """
        Rebuild, sort and render the listing for the current directory.

        Raises:
            PathResolutionError: If the current directory cannot be resolved
            DirectoryOpenError: If it cannot be listed
        """
        directory = canonicalize(self.state.current_directory)
        self.state.current_directory = directory

        logger.info(f"Reloading {directory} ({self.state.sort_mode.value} sort)")

        # Drop the previous snapshot before building its replacement
        self.state.active_listing = None

        listing = list_directory(directory, self.time_format)
        sort_listing(listing, self.state.sort_mode)

        self.state.active_listing = listing
        self.state.selection_index = 0
        self.display.render(listing)
        self.state.needs_reload = False

        return listing

    def close(self) -> None:
        """Release the active listing."""
        self.state.active_listing = None


def run_event_loop(navigator: Navigator) -> None:
    """
    Pull events from a polling display until QUIT.

    The display is torn down exactly once on the way out, including when a
    fatal FfmError propagates.
    """
    display: PollingDisplay = navigator.display  # type: ignore[assignment]
    try:
        navigator.reload_if_needed()
        while navigator.dispatch(display.poll_event()):
            pass
    finally:
        navigator.close()
        display.teardown()
