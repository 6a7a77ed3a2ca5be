"""Data models for docfilter."""

from pathlib import Path

from pydantic import BaseModel, Field


class FormatVariant(BaseModel):
    """One format variant of a rendered page."""

    format: str
    content: str
    path: Path | None = None


class VariantResult(BaseModel):
    """Result of generating the format variants of a page."""

    success: bool
    available_formats: list[str] = Field(default_factory=list)
    variants: list[FormatVariant] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    error: str | None = None

    def get(self, format: str) -> FormatVariant | None:
        """Return the variant for a format, if it was generated."""
        for variant in self.variants:
            if variant.format == format:
                return variant
        return None
