"""
Tests for the keybinding registry.

Modified: 2026-10-19
"""

import pytest

from ffm.core.navigation import Event
from ffm.tui.keybindings import KeybindingRegistry, registry


class TestKeybindingRegistry:
    """Test key to event mapping."""

    @pytest.mark.parametrize(
        "key,event",
        [
            ("q", Event.QUIT),
            ("up", Event.MOVE_UP),
            ("down", Event.MOVE_DOWN),
            ("left", Event.NAVIGATE_PARENT),
            ("right", Event.ENTER),
            ("enter", Event.ENTER),
            ("s", Event.SORT_BY_SIZE),
            ("a", Event.SORT_BY_NAME),
            ("j", Event.MOVE_DOWN),
            ("k", Event.MOVE_UP),
            ("h", Event.NAVIGATE_PARENT),
            ("l", Event.ENTER),
        ],
    )
    def test_default_bindings(self, key, event):
        assert registry.event_for_key(key) == event

    def test_unknown_key(self):
        assert registry.event_for_key("x") == Event.UNRECOGNIZED
        assert registry.event_for_key("question_mark") == Event.UNRECOGNIZED

    def test_keys_for_event_lists_visible_first(self):
        keys = registry.keys_for_event(Event.ENTER)

        assert set(keys) == {"right", "l", "enter"}
        assert keys[-1] == "l"

    def test_register_overrides(self):
        custom = KeybindingRegistry()
        custom.register("x", "Quit too", Event.QUIT)

        assert custom.event_for_key("x") == Event.QUIT
        assert registry.event_for_key("x") == Event.UNRECOGNIZED

    def test_hidden_bindings_not_in_help(self):
        categories = registry.get_bindings_by_category()
        shown = {b.key for bindings in categories.values() for b in bindings}

        assert "q" in shown
        assert "j" not in shown

    def test_help_text(self):
        text = registry.format_help_text()

        assert "Sorting:" in text
        assert "Sort by size" in text
        assert "Quit" in text
