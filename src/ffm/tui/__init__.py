"""
TUI (Terminal User Interface) for ffm.

Textual-based single-column directory browser.

Modified: 2026-10-19
"""

__all__ = ["app", "keybindings", "messages"]
