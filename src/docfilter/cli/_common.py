"""Common CLI utilities and the main app group."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from docfilter.config import get_settings
from docfilter.exceptions import ConfigurationError, InputFileNotFoundError

console = Console(stderr=True)
_configured = False


def configure_logging(*, verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    _configured = True


def read_page(path: Path) -> str:
    """
    Read a rendered page from disk.

    Args:
        path: Path to the HTML file.

    Returns:
        The page's HTML.

    Raises:
        InputFileNotFoundError: If the file does not exist.
    """
    if not path.is_file():
        raise InputFileNotFoundError(f"Input page not found: {path}", file_path=str(path))
    return path.read_text(encoding="utf-8")


@click.group(help="Filter rendered documentation pages down to a single format.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def app(verbose: bool) -> None:
    """
    Entry point for the docfilter CLI.

    Provides commands for filtering a page to one format, generating all
    format variants of a page, and inspecting formats and routes.
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    configure_logging(verbose=verbose, level=settings.log_level)
