"""
UI components for the ffm TUI.

Modified: 2026-10-19
"""

__all__ = [
    "entry_list",
    "status_bar",
]
