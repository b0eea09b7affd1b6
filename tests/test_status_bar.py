"""
Tests for the status bar hint line.

Modified: 2026-10-19
"""

from ffm.tui.ui.status_bar import DEFAULT_HINTS, StatusBar


class RecordingStatic:
    """Stands in for a Static and keeps every update."""

    def __init__(self):
        self.updates = []

    def update(self, text):
        self.updates.append(text)


class TestStatusBarHints:
    """Test the hint text chosen by update_hints."""

    def test_full_hints(self):
        bar = StatusBar()
        bar.hints_widget = RecordingStatic()

        bar.update_hints()

        assert bar.hints_widget.updates == [DEFAULT_HINTS]

    def test_hints_disabled(self):
        bar = StatusBar(show_hints=False)
        bar.hints_widget = RecordingStatic()

        bar.update_hints()

        assert bar.hints_widget.updates == ["Press q to quit"]

    def test_before_compose(self):
        bar = StatusBar()

        bar.update_hints()

        assert bar.hints_widget is None
