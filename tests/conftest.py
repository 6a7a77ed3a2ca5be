"""Pytest configuration and shared fixtures for docfilter tests."""

from pathlib import Path

import pytest

DOC_PAGE = """<!DOCTYPE html>
<html>
<head><title>Guides</title></head>
<body class="docs" data-available-formats="websites stories">
<div class="ap-o-format-toggle">
<div class="ap-m-format-toggle-selected ap-m-format-toggle-link-websites"><span>Format: websites</span></div>
<ul class="ap-m-format-toggle-list">
<li><a class="ap-m-format-toggle-link-websites" href="/documentation/guides-and-tutorials/start">websites</a></li>
<li><a class="ap-m-format-toggle-link-stories" href="/documentation/guides-and-tutorials/start">stories</a></li>
</ul>
</div>
<ul class="nav-list level-1">
<li class="nav-item level-1" id="getting-started"><span>Getting started</span>
<ul class="nav-list level-2">
<li class="nav-item ap--websites" id="web-guide"><a href="/documentation/guides-and-tutorials/web">Web guide</a></li>
<li class="nav-item ap--stories" id="stories-guide"><a href="/documentation/guides-and-tutorials/stories">Stories guide</a></li>
</ul>
</li>
<li class="nav-item level-1" id="ads-only"><span>Ads only</span>
<ul class="nav-list level-2">
<li class="nav-item ap--ads" id="ads-guide"><a href="/documentation/guides-and-tutorials/ads">Ads guide</a></li>
</ul>
</li>
<li class="nav-item level-1" id="reference"><span>Reference</span></li>
</ul>
<ul class="tutorial-list">
<li class="tutorial ap--ads" id="ads-tutorial"><a href="/documentation/guides-and-tutorials/ads-tutorial">Ads tutorial</a></li>
<li class="nav-item-tutorial-divider" id="divider"></li>
<li class="tutorial" id="any-tutorial"><a href="/documentation/guides-and-tutorials/any">Any tutorial</a></li>
</ul>
<main>
<p class="ap--websites ap--stories" id="shared">Shared between websites and stories</p>
<p class="ap--email" id="email-only">Email only</p>
<a id="component" href="/documentation/components/amp-img">amp-img</a>
<a id="absolute" href="https://amp.dev/documentation/examples/interactivity">Example</a>
<a id="with-query" href="/documentation/examples/?referrer=home">Examples</a>
<a id="static" href="/about/">About</a>
<a id="anchor">No target</a>
<div class="filters">
<span class="ap-m-filter-bubble" id="bubble-guide" data-category="guide">Guides</span>
<span class="ap-m-filter-bubble" id="bubble-ads" data-category="ads">Ads</span>
<span class="ap-m-filter-bubble" id="bubble-none">Uncategorised</span>
</div>
<div class="ap-m-teaser" data-category="guide">A guide</div>
<div class="ap-m-teaser ap--ads" data-category="ads">An ads teaser</div>
<svg class="icon" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"><use xlink:href="#icon-arrow"></use></svg>
</main>
</body>
</html>
"""


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Filesystem-heavy tests, may invoke the CLI")
    config.addinivalue_line(
        "markers",
        "e2e: End-to-end tests running the installed command in a subprocess",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Tests should use explicit markers (@pytest.mark.unit, @pytest.mark.integration).
    Unmarked tests default to unit.
    """
    for item in items:
        # Skip if already has a category marker
        markers = list(item.iter_markers())
        marker_names = [m.name for m in markers]
        if any(m in marker_names for m in ("unit", "integration", "e2e")):
            continue

        # Default unmarked tests to unit
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def doc_page() -> str:
    """A rendered documentation page available for websites and stories."""
    return DOC_PAGE


@pytest.fixture
def page_file(tmp_path: Path, doc_page: str) -> Path:
    """Write the documentation page to a temporary file.

    Args:
        tmp_path: Pytest temporary directory.
        doc_page: Rendered page HTML.

    Returns:
        Path to the created HTML file.
    """
    page_file = tmp_path / "guide.html"
    page_file.write_text(doc_page, encoding="utf-8")
    return page_file
