"""Format and route inspection commands."""

import json
from pathlib import Path

import click

from docfilter.cli._common import app, read_page
from docfilter.exceptions import InputFileNotFoundError
from docfilter.formats import is_filterable_route


@app.command("formats", help="List the formats a page declares.")
@click.argument("input_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print a JSON array.")
def formats_cmd(input_path: Path, as_json: bool) -> None:
    """Show the formats from a page's data-available-formats attribute."""
    from bs4 import BeautifulSoup

    from docfilter.services.filtered_page import PARSER, available_formats

    try:
        soup = BeautifulSoup(read_page(input_path), PARSER)
    except InputFileNotFoundError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    available = available_formats(soup)
    if as_json:
        click.echo(json.dumps(available))
    else:
        click.echo("\n".join(available))


@app.command("route", help="Check whether paths take a format query parameter.")
@click.argument("paths", nargs=-1, required=True)
def route_cmd(paths: tuple[str, ...]) -> None:
    """Print each path with whether it is a filterable route."""
    for path in paths:
        marker = "filterable" if is_filterable_route(path) else "static"
        click.echo(f"{marker}\t{path}")
