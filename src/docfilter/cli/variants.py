"""Format variant generation command."""

from pathlib import Path

import click

from docfilter.cli._common import app, read_page
from docfilter.config import get_settings
from docfilter.exceptions import InputFileNotFoundError, ValidationError
from docfilter.formats import FORMATS
from docfilter.utils import validate_output_template


@app.command("variants", help="Write every available format variant of a page.")
@click.argument("input_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output-dir",
    "-d",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Directory for the variants. Defaults to the input's directory or DOCFILTER_OUTPUT_DIR env.",
)
@click.option(
    "--format",
    "-f",
    "formats",
    type=click.Choice(FORMATS, case_sensitive=False),
    multiple=True,
    help="Format to build. Repeat for several. Defaults to all formats.",
)
@click.option(
    "--force/--no-force",
    default=None,
    help="Build variants even for formats the page does not declare. Also reads DOCFILTER_FORCE env.",
)
@click.option(
    "--template",
    type=str,
    default=None,
    help="Filename template with {stem} and {format} fields. Also reads DOCFILTER_OUTPUT_TEMPLATE env.",
)
def variants_cmd(
    input_path: Path,
    output_dir: Path | None,
    formats: tuple[str, ...],
    force: bool | None,
    template: str | None,
) -> None:
    """Generate the format variants of a page.

    Formats the page does not declare are skipped.

    Examples:
        docfilter variants page.html
        docfilter variants page.html -d build -f stories -f ads
    """
    from docfilter.services.variants import build_variants, write_variants

    settings = get_settings()
    if force is None:
        force = settings.force
    if output_dir is None:
        output_dir = settings.get_output_path()
    if template is None:
        template = settings.output_template

    try:
        validate_output_template(template)
        content = read_page(input_path)
    except (ValidationError, InputFileNotFoundError) as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    result = build_variants(content, [name.lower() for name in formats] or None, force=force)
    if not result.success:
        click.echo(f"Error: {result.error}", err=True)
        raise SystemExit(1)

    paths = write_variants(result, input_path, output_dir=output_dir, template=template)
    for path in paths:
        click.echo(str(path))
    if result.skipped:
        click.echo(f"Skipped unavailable formats: {', '.join(result.skipped)}", err=True)
