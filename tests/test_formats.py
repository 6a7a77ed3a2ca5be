"""Tests for format tables and route matching."""

import pytest

from docfilter.exceptions import ValidationError
from docfilter.formats import (
    FILTER_CLASSES,
    FORMATS,
    is_filterable_route,
    toggle_link_class,
    validate_format,
)


class TestIsFilterableRoute:
    """Tests for is_filterable_route function."""

    @pytest.mark.parametrize(
        "route",
        [
            "/documentation/guides-and-tutorials/",
            "/documentation/guides-and-tutorials/start/create/basic_markup",
            "/documentation/components/amp-carousel",
            "/documentation/examples/",
            "https://amp.dev/documentation/examples/style-layout/",
        ],
    )
    def test_matches_filterable_routes(self, route: str):
        """Test that documentation guides, components and examples match."""
        assert is_filterable_route(route)

    @pytest.mark.parametrize(
        "route",
        [
            "",
            "/",
            "/about/",
            "/documentation/",
            "/documentation/courses/",
            "#components",
        ],
    )
    def test_rejects_other_routes(self, route: str):
        """Test that other pages are not filterable."""
        assert not is_filterable_route(route)


class TestFormatTables:
    """Tests for the format constant tables."""

    def test_every_format_has_a_filter_class(self):
        """Test that the class mapping covers all formats."""
        assert set(FILTER_CLASSES) == set(FORMATS)
        for name in FORMATS:
            assert FILTER_CLASSES[name] == f"ap--{name}"

    def test_filter_classes_are_read_only(self):
        """Test that the class mapping can not be changed at runtime."""
        with pytest.raises(TypeError):
            FILTER_CLASSES["video"] = "ap--video"  # type: ignore[index]

    def test_toggle_link_class(self):
        """Test the toggle link naming convention."""
        assert toggle_link_class("email") == "ap-m-format-toggle-link-email"


class TestValidateFormat:
    """Tests for validate_format function."""

    @pytest.mark.parametrize("name", FORMATS)
    def test_accepts_known_formats(self, name: str):
        """Test that known formats pass through."""
        assert validate_format(name) == name

    def test_rejects_unknown_format(self):
        """Test that unknown formats raise with context."""
        with pytest.raises(ValidationError) as exc_info:
            validate_format("video")
        assert exc_info.value.context == {"field": "format", "value": "video"}
        assert "correlation_id=" in str(exc_info.value)
