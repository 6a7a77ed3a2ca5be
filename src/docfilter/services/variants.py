"""Generate every format variant of a rendered page."""

import logging
from collections.abc import Iterable
from pathlib import Path

from docfilter.exceptions import UnavailableFormatError
from docfilter.formats import FORMATS, validate_format
from docfilter.models import FormatVariant, VariantResult
from docfilter.services.filtered_page import FilteredPage
from docfilter.utils import variant_output_path

LOGGER = logging.getLogger(__name__)


def build_variants(
    content: str,
    formats: Iterable[str] | None = None,
    force: bool = False,
) -> VariantResult:
    """
    Filter a page once per format.

    Formats the page does not declare are skipped rather than failing the
    whole run.

    Args:
        content: Rendered HTML page.
        formats: Formats to build. Defaults to all of FORMATS.
        force: Build variants even for undeclared formats.

    Returns:
        VariantResult with the generated variants and skipped formats.

    Raises:
        ValidationError: If one of formats is unknown.
    """
    requested = [validate_format(name) for name in (formats or FORMATS)]
    variants: list[FormatVariant] = []
    skipped: list[str] = []
    available: list[str] = []

    for name in requested:
        try:
            page = FilteredPage(name, content, force=force)
        except UnavailableFormatError as e:
            LOGGER.info(f"Skipping format {name}: {e.message}")
            available = e.available
            skipped.append(name)
            continue
        available = list(page.available_formats)
        variants.append(FormatVariant(format=name, content=page.content))

    LOGGER.debug(f"Built {len(variants)} variants, skipped {len(skipped)}")
    return VariantResult(
        success=bool(variants),
        available_formats=available,
        variants=variants,
        skipped=skipped,
        error=None if variants else "Page is not available for any requested format",
    )


def write_variants(
    result: VariantResult,
    source: Path,
    output_dir: Path | None = None,
    template: str = "{stem}.{format}.html",
) -> list[Path]:
    """
    Write generated variants to disk.

    Args:
        result: Result of build_variants.
        source: Path of the rendered input page, used for naming.
        output_dir: Target directory. Defaults to the input's directory.
        template: Filename template with ``{stem}`` and ``{format}`` fields.

    Returns:
        Paths of the written files, in variant order.
    """
    paths: list[Path] = []
    for variant in result.variants:
        path = variant_output_path(source, variant.format, output_dir=output_dir, template=template)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(variant.content, encoding="utf-8")
        variant.path = path
        paths.append(path)
        LOGGER.info(f"Wrote {variant.format} variant to {path}")
    return paths
