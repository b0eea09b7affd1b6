"""
Tests for the command line entry point.

Modified: 2026-10-19
"""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from ffm import __version__
from ffm.cli import configure_logging, main
from ffm.config.settings import Settings
from ffm.core.exceptions import DirectoryOpenError
from ffm.core.models import SortMode


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def base_args(tmp_path, clean_env):
    """Options that keep the CLI away from the real home directory."""
    return ["--config", str(tmp_path / "none.yaml"), "--log-file", str(tmp_path / "ffm.log")]


def finished_app(exit_code=0, fatal_error=None):
    return SimpleNamespace(exit_code=exit_code, fatal_error=fatal_error)


class TestCli:
    """Test ffm command behavior."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_runs_app_in_canonical_directory(self, runner, base_args, sample_tree):
        with patch("ffm.tui.app.run_app", new=AsyncMock(return_value=finished_app())) as run_app:
            result = runner.invoke(main, [str(sample_tree / "docs" / ".."), *base_args])

        assert result.exit_code == 0
        args, kwargs = run_app.call_args
        assert args[0] == str(sample_tree)
        assert kwargs["sort_mode"] == SortMode.BY_NAME

    def test_sort_option(self, runner, base_args, sample_tree):
        with patch("ffm.tui.app.run_app", new=AsyncMock(return_value=finished_app())) as run_app:
            result = runner.invoke(main, [str(sample_tree), "--sort", "size", *base_args])

        assert result.exit_code == 0
        assert run_app.call_args.kwargs["sort_mode"] == SortMode.BY_SIZE

    def test_sort_from_config(self, runner, tmp_path, clean_env, sample_tree):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("behavior:\n  default_sort: size\n")
        args = [str(sample_tree), "--config", str(config_file), "--log-file", str(tmp_path / "ffm.log")]

        with patch("ffm.tui.app.run_app", new=AsyncMock(return_value=finished_app())) as run_app:
            result = runner.invoke(main, args)

        assert result.exit_code == 0
        assert run_app.call_args.kwargs["sort_mode"] == SortMode.BY_SIZE

    def test_missing_start_directory(self, runner, base_args, tmp_path):
        with patch("ffm.tui.app.run_app", new=AsyncMock()) as run_app:
            result = runner.invoke(main, [str(tmp_path / "missing"), *base_args])

        assert result.exit_code == 1
        assert "Cannot resolve starting directory" in result.output
        run_app.assert_not_called()

    def test_fatal_error_exit_code(self, runner, base_args, sample_tree):
        error = DirectoryOpenError("/gone", "Permission denied")
        app = finished_app(exit_code=1, fatal_error=error)

        with patch("ffm.tui.app.run_app", new=AsyncMock(return_value=app)):
            result = runner.invoke(main, [str(sample_tree), *base_args])

        assert result.exit_code == 1
        assert "/gone: Permission denied" in result.output

    def test_unexpected_failure_exit_code(self, runner, base_args, sample_tree):
        app = finished_app(exit_code=1)

        with patch("ffm.tui.app.run_app", new=AsyncMock(return_value=app)):
            result = runner.invoke(main, [str(sample_tree), *base_args])

        assert result.exit_code == 1
        assert "TUI error: stopped with status 1" in result.output

    def test_app_crash_exits_nonzero(self, runner, base_args, sample_tree):
        with patch("ffm.tui.app.run_app", new=AsyncMock(side_effect=RuntimeError("boom"))):
            result = runner.invoke(main, [str(sample_tree), *base_args])

        assert result.exit_code == 1
        assert "TUI error: boom" in result.output

    def test_invalid_config(self, runner, tmp_path, clean_env, sample_tree):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("behavior:\n  default_sort: color\n")

        result = runner.invoke(main, [str(sample_tree), "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_configure_logging_creates_parent(self, tmp_path):
        log_file = tmp_path / "logs" / "ffm.log"

        path = configure_logging(Settings(), log_file)

        assert path == log_file
        assert (tmp_path / "logs").is_dir()

    def test_configure_logging_defaults_to_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        path = configure_logging(Settings())

        assert path == tmp_path / ".cache" / "ffm" / "ffm.log"
        assert path.parent.is_dir()
