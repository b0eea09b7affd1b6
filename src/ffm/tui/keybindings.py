"""Central keybinding registry for ffm.

Single source of truth for which Textual key maps to which navigator event.

Modified: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, List

from ..core.navigation import Event


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name
    description: str  # Human-readable description
    event: Event  # Navigator event the key produces
    category: str = "General"  # Category for grouping in help
    hidden: bool = False  # Whether to show in help text


class KeybindingRegistry:
    """Central registry for all keybindings."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Application
        self.register("q", "Quit", Event.QUIT, "Application")

        # Navigation
        self.register("up", "Move up", Event.MOVE_UP, "Navigation")
        self.register("k", "Move up", Event.MOVE_UP, "Navigation", hidden=True)
        self.register("down", "Move down", Event.MOVE_DOWN, "Navigation")
        self.register("j", "Move down", Event.MOVE_DOWN, "Navigation", hidden=True)
        self.register("left", "Go to parent directory", Event.NAVIGATE_PARENT, "Navigation")
        self.register("h", "Go to parent directory", Event.NAVIGATE_PARENT, "Navigation", hidden=True)
        self.register("backspace", "Go to parent directory", Event.NAVIGATE_PARENT, "Navigation", hidden=True)
        self.register("right", "Enter directory", Event.ENTER, "Navigation")
        self.register("l", "Enter directory", Event.ENTER, "Navigation", hidden=True)
        self.register("enter", "Enter directory", Event.ENTER, "Navigation")

        # Sorting
        self.register("a", "Sort by name", Event.SORT_BY_NAME, "Sorting")
        self.register("s", "Sort by size", Event.SORT_BY_SIZE, "Sorting")

    def register(self, key: str, description: str, event: Event,
                 category: str = "General",
                 hidden: bool = False) -> None:
        """Register a keybinding."""
        self.keybindings[key] = Keybinding(
            key=key,
            description=description,
            event=event,
            category=category,
            hidden=hidden
        )

    def event_for_key(self, key: str) -> Event:
        """Map a Textual key name to a navigator event."""
        binding = self.keybindings.get(key)
        if binding is None:
            return Event.UNRECOGNIZED
        return binding.event

    def keys_for_event(self, event: Event) -> List[str]:
        """All keys that produce an event, visible ones first."""
        bindings = [b for b in self.keybindings.values() if b.event == event]
        bindings.sort(key=lambda b: b.hidden)
        return [b.key for b in bindings]

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if not binding.hidden:
                if binding.category not in result:
                    result[binding.category] = []
                result[binding.category].append(binding)
        return result

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"{category}:")
            for binding in categories[category]:
                lines.append(f"  {binding.key.ljust(10)} {binding.description}")
        lines.append("Press '?' to show this help")
        return "\n".join(lines)


# Global registry instance
registry = KeybindingRegistry()
