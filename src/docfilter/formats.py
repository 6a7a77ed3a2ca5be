"""Format names, their filter classes and the routes that take a format parameter."""

import re
from types import MappingProxyType
from typing import Literal

from docfilter.exceptions import ValidationError

type Format = Literal["websites", "stories", "ads", "email"]

FORMATS: tuple[Format, ...] = ("websites", "stories", "ads", "email")

# Default format the renderer bakes into the toggle markup
DEFAULT_FORMAT: Format = "websites"

FILTER_CLASSES: MappingProxyType[str, str] = MappingProxyType(
    {
        "websites": "ap--websites",
        "stories": "ap--stories",
        "ads": "ap--ads",
        "email": "ap--email",
    }
)

FILTERED_ROUTES: tuple[re.Pattern[str], ...] = (
    re.compile(r"/documentation/guides-and-tutorials.*"),
    re.compile(r"/documentation/components.*"),
    re.compile(r"/documentation/examples.*"),
)

# Markup conventions shared with the documentation renderer
TOGGLE_SELECTED_CLASS = "ap-m-format-toggle-selected"
TOGGLE_LINK_CLASS_PREFIX = "ap-m-format-toggle-link-"
FILTER_BUBBLE_CLASS = "ap-m-filter-bubble"
TEASER_CLASS = "ap-m-teaser"


def is_filterable_route(route: str) -> bool:
    """
    Check whether a link target should carry a format query parameter.

    Args:
        route: Path or href to check.

    Returns:
        True if any of FILTERED_ROUTES matches.
    """
    return any(expression.search(route) for expression in FILTERED_ROUTES)


def toggle_link_class(format: str) -> str:
    """Return the toggle link class for a format."""
    return f"{TOGGLE_LINK_CLASS_PREFIX}{format}"


def validate_format(format: str) -> Format:
    """
    Ensure a format name is one of FORMATS.

    Args:
        format: Candidate format name.

    Returns:
        The same name, typed as Format.

    Raises:
        ValidationError: If the name is unknown.
    """
    if format not in FORMATS:
        raise ValidationError(
            f"Unknown format: {format}. Must be one of: {', '.join(FORMATS)}",
            field="format",
            value=format,
        )
    return format  # type: ignore[return-value]
