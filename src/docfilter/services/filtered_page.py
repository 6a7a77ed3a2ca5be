"""Static format filtering for rendered documentation pages.

A documentation page is rendered once with the content for every format
(websites, stories, ads, email) and hides the irrelevant parts with CSS.
FilteredPage turns such a page into a single format variant:

1. Elements tagged for other formats are removed, along with navigation
   groups and tutorial dividers left empty by that
2. Links to filterable routes get a ``format`` query parameter
3. The format toggle is switched from websites to the active format
4. Filter classes are stripped as they have served their purpose
5. Category filter bubbles without a matching teaser are removed

Finally ``<body>`` is marked with the active format's filter class so
stylesheets can still tell the variants apart.
"""

import logging
import re

from bs4 import BeautifulSoup, Doctype, NavigableString, Tag

from docfilter.exceptions import UnavailableFormatError
from docfilter.formats import (
    DEFAULT_FORMAT,
    FILTER_BUBBLE_CLASS,
    FILTER_CLASSES,
    FORMATS,
    TEASER_CLASS,
    TOGGLE_SELECTED_CLASS,
    Format,
    is_filterable_route,
    toggle_link_class,
    validate_format,
)
from docfilter.utils import add_class, has_class, log_with_correlation, remove_classes

LOGGER = logging.getLogger(__name__)

# lxml closes omitted </li> and </p> tags the way browsers do
PARSER = "lxml"

AVAILABLE_FORMATS_ATTRIBUTE = "data-available-formats"

SVG_NAMESPACE_BROKEN = 'xmlns="http://www.w3.org/2000/svg" xlink="http://www.w3.org/1999/xlink"'
SVG_NAMESPACE_FIXED = 'xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
XLINK_HREF_BROKEN = re.compile(r'(?<![:\w])xlink="http://www\.w3\.org/1999/xlink" href=')
XLINK_HREF_FIXED = 'xmlns:xlink="http://www.w3.org/1999/xlink" xlink:href='


def _class_selector(classes) -> str:
    return ", ".join(f".{name}" for name in classes)


def _strip_doctype_newline(soup: BeautifulSoup) -> None:
    """Drop the newline after <!DOCTYPE>, the doctype serialises with its own."""
    for node in soup.contents:
        if not isinstance(node, Doctype):
            continue
        following = node.next_sibling
        if type(following) is NavigableString and following.startswith("\n"):
            remainder = str(following)[1:]
            if remainder:
                following.replace_with(NavigableString(remainder))
            else:
                following.extract()
        return


def _replace_in_markup(element: Tag, old: str, new: str) -> None:
    """Replace text in the strings and attribute values below element, in place."""
    for node in list(element.descendants):
        if isinstance(node, Tag):
            for name, value in list(node.attrs.items()):
                if isinstance(value, list):
                    node[name] = [item.replace(old, new) for item in value]
                elif isinstance(value, str):
                    node[name] = value.replace(old, new)
        elif isinstance(node, NavigableString) and old in node:
            node.replace_with(type(node)(node.replace(old, new)))


def declared_formats(soup: BeautifulSoup) -> str:
    """
    Return the raw data-available-formats value of a page's <body>.

    The renderer writes the formats space separated; it is matched by
    substring, a missing <body> or attribute declares nothing.
    """
    body = soup.body
    if body is None:
        return ""
    value = body.get(AVAILABLE_FORMATS_ATTRIBUTE) or ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def available_formats(soup: BeautifulSoup) -> list[Format]:
    """Formats a page declares content for, in FORMATS order."""
    declared = declared_formats(soup)
    return [name for name in FORMATS if name in declared]


class FilteredPage:
    """A rendered documentation page reduced to one format.

    The transform runs eagerly on construction; read the result from
    ``content``.

    Usage:
        page = FilteredPage("stories", html)
        html = page.content
    """

    def __init__(self, format: str, content: str, force: bool = False) -> None:
        """
        Parse a page and filter it down to a format.

        Args:
            format: One of FORMATS.
            content: A complete rendered HTML document.
            force: Filter even if the page does not declare the format.

        Raises:
            ValidationError: If format is not one of FORMATS.
            UnavailableFormatError: If the page is not available for format
                and force is not set.
        """
        self._format: Format = validate_format(format)
        self._soup = BeautifulSoup(content, PARSER)
        _strip_doctype_newline(self._soup)

        if not self.is_available and not force:
            raise UnavailableFormatError(self._format, self.available_formats)

        self._remove_hidden_elements()
        self._rewrite_urls()
        self._set_active_format_toggle()
        self._remove_stale_filter_classes()
        self._remove_empty_filter_bubbles()
        self._add_class_to_body()

    @property
    def format(self) -> Format:
        """The format this page was filtered for."""
        return self._format

    @property
    def soup(self) -> BeautifulSoup:
        """The filtered document tree."""
        return self._soup

    @property
    def available_formats(self) -> list[Format]:
        """Formats the page declares content for, in FORMATS order."""
        return available_formats(self._soup)

    @property
    def is_available(self) -> bool:
        """Check if the page declares content for the active format."""
        return self._format in declared_formats(self._soup)

    def _add_class_to_body(self) -> None:
        """Mark <body> with the active format to allow format based styling."""
        body = self._soup.body
        if body is not None:
            add_class(body, FILTER_CLASSES[self._format])

    def _remove_hidden_elements(self) -> None:
        """Remove elements that would otherwise be hidden by CSS, then tidy up the navigation."""
        active_class = FILTER_CLASSES[self._format]
        inactive_classes = [name for fmt, name in FILTER_CLASSES.items() if fmt != self._format]

        removed = 0
        for element in self._soup.select(_class_selector(inactive_classes)):
            # Already gone with a removed ancestor
            if element.decomposed:
                continue
            # Shared between formats
            if has_class(element, active_class):
                continue
            element.decompose()
            removed += 1

        # Second level lists that lost all entries take their parent item with them
        for nav_list in self._soup.select(".nav-list.level-2"):
            if nav_list.decomposed:
                continue
            if nav_list.find(True, recursive=False) is None:
                parent = nav_list.parent
                if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup):
                    parent.decompose()
                else:
                    nav_list.decompose()

        # A top level category without links is empty
        for nav_item in self._soup.select(".nav-item.level-1"):
            if nav_item.decomposed:
                continue
            if nav_item.find("a") is None:
                nav_item.decompose()

        # Dividers left at the edges of a list separate nothing
        for divider in self._soup.select(
            ".nav-item-tutorial-divider:first-child, .nav-item-tutorial-divider:last-child"
        ):
            if not divider.decomposed:
                divider.decompose()

        LOGGER.debug(f"Removed {removed} elements hidden for format {self._format}")

    def _rewrite_urls(self) -> None:
        """Append the active format to links pointing at filterable routes."""
        for anchor in self._soup.find_all("a"):
            href = anchor.get("href") or ""
            # Links that already carry a query are left alone
            if "?" not in href and is_filterable_route(href):
                anchor["href"] = f"{href}?format={self._format}"

    def _set_active_format_toggle(self) -> None:
        """Switch the format toggle from the default format to the active one."""
        toggles = self._soup.select(f".{TOGGLE_SELECTED_CLASS}")
        if not toggles:
            log_with_correlation(
                LOGGER,
                logging.WARNING,
                "Page has no active format.",
                page_format=self._format,
            )
            return

        for toggle in toggles:
            if self._format != DEFAULT_FORMAT:
                _replace_in_markup(toggle, DEFAULT_FORMAT, self._format)

            remove_classes(toggle, {toggle_link_class(DEFAULT_FORMAT)})
            add_class(toggle, toggle_link_class(self._format))

        # A format can not link to itself
        for link in self._soup.select(f"a.{toggle_link_class(self._format)}"):
            if not link.decomposed:
                link.decompose()

    def _remove_stale_filter_classes(self) -> None:
        """Strip filter classes, they are not needed after static filtering."""
        filter_classes = frozenset(FILTER_CLASSES.values())
        for element in self._soup.select(_class_selector(FILTER_CLASSES.values())):
            remove_classes(element, filter_classes)

    def _remove_empty_filter_bubbles(self) -> None:
        """Remove filter bubbles whose category no longer has a teaser on the page."""
        categories = {
            teaser.get("data-category") for teaser in self._soup.select(f".{TEASER_CLASS}[data-category]")
        }

        for bubble in self._soup.select(f".{FILTER_BUBBLE_CLASS}"):
            if bubble.decomposed:
                continue
            category = bubble.get("data-category")
            if category is None or category not in categories:
                bubble.decompose()

    @property
    def content(self) -> str:
        """Serialise the filtered page to an HTML string."""
        content = str(self._soup)

        # The HTML serialiser does not know about XML namespaces, restore
        # the markup inline SVG icons need
        content = content.replace(SVG_NAMESPACE_BROKEN, SVG_NAMESPACE_FIXED, 1)
        content = XLINK_HREF_BROKEN.sub(XLINK_HREF_FIXED, content)

        return content
