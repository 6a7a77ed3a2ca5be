"""
Configuration for docfilter.

Uses Pydantic Settings for type-safe environment variable loading.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docfilter.exceptions import ConfigurationError, ValidationError
from docfilter.utils import validate_output_template


class DocfilterSettings(BaseSettings):
    """docfilter settings."""

    model_config = SettingsConfigDict(
        env_prefix="DOCFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Output
    output_template: str = Field(
        default="{stem}.{format}.html",
        description="Filename template for variants, with {stem} and {format} fields",
    )
    output_dir: str | None = Field(
        default=None,
        description="Directory for variants. Defaults to the input page's directory.",
    )

    # Filtering
    force: bool = Field(
        default=False,
        description="Filter pages even for formats they do not declare",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    @field_validator("output_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Ensure variants of one page get distinct filenames."""
        try:
            return validate_output_template(v)
        except ValidationError as e:
            raise ValueError(e.message) from e

    def get_output_path(self) -> Path | None:
        """Get output directory as Path, expanding ~ if present."""
        if self.output_dir:
            return Path(self.output_dir).expanduser()
        return None


@lru_cache
def get_settings() -> DocfilterSettings:
    """
    Get cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid settings.
    """
    try:
        return DocfilterSettings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid docfilter settings: {e}", config_path=".env") from e
