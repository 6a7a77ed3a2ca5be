"""Service layer for docfilter.

This module provides the core services:
- FilteredPage: Reduce a rendered page to a single format
- build_variants / write_variants: Generate every available format variant
"""

from docfilter.services.filtered_page import FilteredPage, available_formats
from docfilter.services.variants import build_variants, write_variants

__all__ = [
    "FilteredPage",
    "available_formats",
    "build_variants",
    "write_variants",
]
