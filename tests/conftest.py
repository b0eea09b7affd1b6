"""Shared test fixtures for ffm tests.

Created: 2026-10-19
"""

import os
import pytest

from ffm.config.settings import Settings
from ffm.core.models import SortMode
from ffm.core.navigation import NavigationState, Navigator

from tests.utils import FakeDisplay


@pytest.fixture
def sample_tree(tmp_path):
    """Directory with a subdirectory, a file and three kinds of symlink.

    Layout:
        docs/               (contains guide.md)
        readme.txt          (10 bytes)
        big.bin             (4096 bytes)
        docs_link -> docs
        file_link -> readme.txt
        broken_link -> missing-target
    """
    root = tmp_path / "tree"
    root.mkdir()

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("# guide\n")

    (root / "readme.txt").write_bytes(b"0123456789")
    (root / "big.bin").write_bytes(b"\0" * 4096)

    os.symlink("docs", root / "docs_link")
    os.symlink("readme.txt", root / "file_link")
    os.symlink("missing-target", root / "broken_link")

    return root.resolve()


@pytest.fixture
def fake_display():
    """Display adapter with no queued events."""
    return FakeDisplay()


@pytest.fixture
def navigator(sample_tree, fake_display):
    """Navigator over sample_tree, already showing its first listing."""
    state = NavigationState.start(str(sample_tree), SortMode.BY_NAME)
    nav = Navigator(state, fake_display)
    nav.reload_if_needed()
    return nav


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ffm environment overrides so settings come from files/defaults."""
    for name in ("FFM_SORT", "FFM_TIME_FORMAT", "FFM_LOG_LEVEL", "FFM_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def default_settings(clean_env, tmp_path):
    """Settings loaded with no config file present."""
    return Settings.load(tmp_path / "no-config.yaml")
