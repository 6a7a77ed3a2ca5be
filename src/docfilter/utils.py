"""Utility functions for docfilter."""

import logging
from pathlib import Path
from string import Formatter
from typing import Any

from bs4 import Tag

from docfilter.exceptions import ValidationError, generate_correlation_id

LOGGER = logging.getLogger(__name__)


def log_with_correlation(
    logger: logging.Logger,
    level: int,
    message: str,
    correlation_id: str | None = None,
    **kwargs: Any,
) -> None:
    """
    Log a message with correlation ID and additional context.

    Args:
        logger: Logger instance to use.
        level: Logging level (e.g., logging.INFO, logging.ERROR).
        message: Log message format string.
        correlation_id: Optional correlation ID. If None, generates a new one.
        **kwargs: Additional context to include in log extra fields.
    """
    corr_id = correlation_id or generate_correlation_id()
    extra = {"correlation_id": corr_id, **kwargs}
    logger.log(level, message, extra=extra)


# Class list helpers


def get_classes(element: Tag) -> list[str]:
    """
    Return the class list of an element.

    Parsed pages hand back ``class`` as a list, but attributes set by hand
    may still be plain strings.
    """
    classes = element.get("class")
    if not classes:
        return []
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


def has_class(element: Tag, name: str) -> bool:
    """Check whether an element carries a class."""
    return name in get_classes(element)


def add_class(element: Tag, name: str) -> None:
    """Add a class to an element unless it is already present."""
    classes = get_classes(element)
    if name not in classes:
        classes.append(name)
    element["class"] = classes


def remove_classes(element: Tag, names: set[str] | frozenset[str]) -> None:
    """
    Remove classes from an element.

    The ``class`` attribute is dropped entirely once no class is left.
    """
    classes = [name for name in get_classes(element) if name not in names]
    if classes:
        element["class"] = classes
    elif element.has_attr("class"):
        del element["class"]


def variant_output_path(
    source: Path,
    format: str,
    output_dir: Path | None = None,
    template: str = "{stem}.{format}.html",
) -> Path:
    """
    Build the output path for one format variant of a page.

    Args:
        source: Path of the rendered input page.
        format: Format of the variant.
        output_dir: Target directory. Defaults to the input's directory.
        template: Filename template with ``{stem}`` and ``{format}`` fields.

    Returns:
        Path for the variant file.
    """
    directory = output_dir if output_dir is not None else source.parent
    return directory / template.format(stem=source.stem, format=format)


TEMPLATE_FIELDS = frozenset({"stem", "format"})


def validate_output_template(template: str) -> str:
    """
    Check a variant filename template.

    The template must contain ``{format}`` so the variants of a page get
    distinct files, and may only use the ``{stem}`` and ``{format}`` fields.

    Args:
        template: Filename template.

    Returns:
        The template, unchanged.

    Raises:
        ValidationError: If the template is malformed or uses other fields.
    """
    try:
        fields = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
    except ValueError as e:
        raise ValidationError(
            f"Invalid output template {template!r}: {e}",
            field="output_template",
            value=template,
        ) from e

    unknown = fields - TEMPLATE_FIELDS
    if unknown:
        raise ValidationError(
            f"Invalid output template {template!r}: unknown fields {', '.join(sorted(unknown))}, "
            "only {stem} and {format} are allowed",
            field="output_template",
            value=template,
        )
    if "format" not in fields:
        raise ValidationError(
            f"Invalid output template {template!r}: must contain {{format}}",
            field="output_template",
            value=template,
        )
    return template
