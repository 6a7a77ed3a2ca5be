"""Custom exceptions for docfilter with context support."""

import uuid
from collections.abc import Iterable
from typing import Any


def generate_correlation_id() -> str:
    """
    Generate an 8-character UUID-based correlation ID.

    Returns:
        8-character correlation ID string.
    """
    return str(uuid.uuid4())[:8]


class DocfilterError(Exception):
    """Base exception for docfilter with context and correlation ID support."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise exception with message, correlation ID, and context.

        Args:
            message: Error message.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ValidationError(DocfilterError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise validation error with field and value context.

        Args:
            message: Error message.
            field: Optional field name that failed validation.
            value: Optional value that failed validation.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)
        super().__init__(message, correlation_id=correlation_id, context=context)


class UnavailableFormatError(DocfilterError):
    """Raised when a page does not declare content for the requested format."""

    def __init__(
        self,
        format: str,
        available: Iterable[str] = (),
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise with the requested format and what the page offers.

        Args:
            format: The format that was requested.
            available: Formats the page declares via data-available-formats.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        self.format = format
        self.available = list(available)
        if context is None:
            context = {}
        context["format"] = format
        context["available_formats"] = self.available
        super().__init__(
            f"This page is not available for format {format}",
            correlation_id=correlation_id,
            context=context,
        )


class ConfigurationError(DocfilterError):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise configuration error with path context.

        Args:
            message: Error message.
            config_path: Optional path to the configuration file.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if config_path is not None:
            context["config_path"] = str(config_path)
        super().__init__(message, correlation_id=correlation_id, context=context)


class FileNotFoundError(DocfilterError):
    """Raised when an input page is not found."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise file not found error with path context.

        Args:
            message: Error message.
            file_path: Optional path to the missing file.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if file_path is not None:
            context["file_path"] = str(file_path)
        super().__init__(message, correlation_id=correlation_id, context=context)


# Alias to avoid shadowing built-in, but keep custom exception
InputFileNotFoundError = FileNotFoundError
