"""Single page filtering command."""

from pathlib import Path

import click

from docfilter.cli._common import app, read_page
from docfilter.config import get_settings
from docfilter.exceptions import InputFileNotFoundError, UnavailableFormatError
from docfilter.formats import FORMATS


@app.command("filter", help="Filter a rendered page down to one format.")
@click.argument("input_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "page_format",
    type=click.Choice(FORMATS, case_sensitive=False),
    required=True,
    help="Format to filter the page for.",
)
@click.option(
    "--force/--no-force",
    default=None,
    help="Filter even if the page does not declare the format. Also reads DOCFILTER_FORCE env.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Output file path. If omitted, prints to stdout.",
)
def filter_cmd(input_path: Path, page_format: str, force: bool | None, output: Path | None) -> None:
    """Filter a page to a single format.

    Examples:
        docfilter filter page.html --format stories
        docfilter filter page.html -f email --force -o page.email.html
    """
    from docfilter.services.filtered_page import FilteredPage

    if force is None:
        force = get_settings().force

    try:
        page = FilteredPage(page_format.lower(), read_page(input_path), force=force)
    except (InputFileNotFoundError, UnavailableFormatError) as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    content = page.content
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        click.echo(f"Wrote {page.format} variant to {output}")
    else:
        click.echo(content)
