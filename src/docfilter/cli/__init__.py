"""Command-line interface for docfilter.

Commands are organized into modules by functionality:

- filter: Filter one page to a single format
- variants: Write every available format variant of a page
- info: Show declared formats and filterable routes (formats, route)
"""

# Import all command modules to register them with the app
from docfilter.cli import (
    filter,  # noqa: F401
    info,  # noqa: F401
    variants,  # noqa: F401
)
from docfilter.cli._common import app

__all__ = ["app"]
