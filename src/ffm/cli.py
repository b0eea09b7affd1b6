"""
CLI entry point for ffm.

Modified: 2026-10-19
"""

import asyncio
import locale
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ffm import __version__
from ffm.config.settings import Settings
from ffm.core.exceptions import ConfigurationError, PathResolutionError
from ffm.core.models import SortMode
from ffm.core.navigation import canonicalize


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings, log_file: Optional[Path] = None) -> Path:
    """
    Send log records to a file; the terminal belongs to the TUI.

    Args:
        settings: Loaded settings (level and default file)
        log_file: Optional override for the log file path

    Returns:
        Path of the log file
    """
    path = Path(log_file).expanduser() if log_file else settings.logging.path
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        level=settings.logging.level.upper(),
        format=LOG_FORMAT,
    )
    return path


@click.command()
@click.argument("path", required=False, default=".", type=click.Path(path_type=Path))
@click.option(
    "--sort",
    type=click.Choice(["name", "size"], case_sensitive=False),
    default=None,
    help="Initial sort mode (default: from config, else name)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/ffm/config.yaml)",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (default: ~/.cache/ffm/ffm.log)",
)
@click.version_option(version=__version__)
def main(path: Path, sort: Optional[str], config_path: Optional[Path], log_file: Optional[Path]):
    """Browse PATH (default: current directory) from the keyboard."""
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        # Fall back to the C locale for timestamps
        pass

    try:
        settings = Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        configure_logging(settings, log_file)
    except OSError as e:
        click.echo(f"✗ Cannot open log file: {e}", err=True)
        sys.exit(1)

    try:
        start_directory = canonicalize(str(path))
    except PathResolutionError as e:
        click.echo(f"✗ Cannot resolve starting directory {e}", err=True)
        sys.exit(1)

    sort_mode = SortMode.from_string(sort) if sort else settings.behavior.sort_mode
    logger.info(f"Starting in {start_directory} ({sort_mode.value} sort)")

    try:
        from ffm.tui.app import run_app

        app = asyncio.run(run_app(start_directory, settings=settings, sort_mode=sort_mode))
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
        sys.exit(0)
    except Exception as e:
        logger.exception("TUI failed")
        click.echo(f"✗ TUI error: {e}", err=True)
        sys.exit(1)

    if app.fatal_error is not None:
        click.echo(f"✗ {app.fatal_error}", err=True)
    elif app.exit_code:
        click.echo(f"✗ TUI error: stopped with status {app.exit_code}", err=True)

    sys.exit(app.exit_code)


if __name__ == "__main__":
    main()
