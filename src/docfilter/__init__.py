"""Filter rendered documentation pages down to a single format variant."""

__version__ = "0.1.0"

from docfilter.exceptions import DocfilterError, UnavailableFormatError
from docfilter.formats import FILTER_CLASSES, FORMATS, is_filterable_route
from docfilter.services import FilteredPage, build_variants, write_variants

__all__ = [
    "FILTER_CLASSES",
    "FORMATS",
    "DocfilterError",
    "FilteredPage",
    "UnavailableFormatError",
    "build_variants",
    "is_filterable_route",
    "write_variants",
]
