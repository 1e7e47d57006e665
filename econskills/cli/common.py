"""Shared CLI utilities for econskills commands."""

import logging
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.spinner import Spinner

from econskills.catalog import CatalogEntry, DEFAULT_CATALOG, discover_catalog
from econskills.config import CONFIG_FILENAME, SiteConfig, load_config
from econskills.control import DownloadControl
from econskills.exceptions import CatalogError, ConfigParseError, ConfigValidationError

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route econskills log records through Rich on stderr."""
    logger = logging.getLogger("econskills")
    logger.handlers = [
        RichHandler(console=err_console, show_path=False, show_time=False, markup=False)
    ]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def exit_with_error(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def cli_alert(message: str) -> None:
    """Alert callback used by download operations."""
    typer.echo(f"Error: {message}", err=True)


def get_config() -> SiteConfig:
    """Load econskills.toml from the current directory tree or use defaults."""
    try:
        return load_config()
    except ConfigParseError as e:
        exit_with_error(f"Failed to parse {CONFIG_FILENAME}: {e}")
    except ConfigValidationError as e:
        exit_with_error(f"Invalid {CONFIG_FILENAME}: {e}")


def get_catalog(config: SiteConfig, content_dir: Path | None = None) -> tuple[CatalogEntry, ...]:
    """Catalog from --content-dir, then [catalog] content_dir, then the built-in list."""
    if content_dir is None and config.content_dir:
        content_dir = config.resolve_path(config.content_dir)
    if content_dir is None:
        return DEFAULT_CATALOG

    try:
        return discover_catalog(content_dir)
    except CatalogError as e:
        exit_with_error(str(e))


def get_output_dir(config: SiteConfig, output: Path | None) -> Path:
    if output is not None:
        return output
    return config.resolve_path(config.output_dir)


@contextmanager
def download_spinner(control: DownloadControl):
    """Show a spinner that follows the control's label during a download."""
    spinner = Spinner("dots", text=control.label)

    def _follow(updated: DownloadControl) -> None:
        spinner.update(text=updated.label)

    control.listeners.append(_follow)
    try:
        with Live(spinner, console=console, transient=True):
            yield
    finally:
        control.listeners.remove(_follow)
