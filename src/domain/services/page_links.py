"""HTML rendering of a page-number window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domain.exceptions.pagination_exceptions import InvalidUriTemplateError

if TYPE_CHECKING:
    from domain.models.page_set import PageSet

CLASS_PAGE = "pg-page"
CLASS_SELECTED = "pg-selected"
CLASS_FIRST = "pg-page-first"
CLASS_LAST = "pg-page-last"
CLASS_ELLIPSIS_FIRST = "pg-page-ellipsis-first"
CLASS_ELLIPSIS_LAST = "pg-page-ellipsis-last"


def _page_uri(uri_template: str, page: int) -> str:
    try:
        return uri_template % page
    except (TypeError, ValueError) as exc:
        raise InvalidUriTemplateError(uri_template, str(exc)) from exc


def _link(css_class: str, href: str, label: int) -> str:
    return f'<a class="{css_class}" href="{href}">{label}</a> '


def render_page_links(page_set: PageSet, uri_template: str) -> str:
    """Render *page_set* as a flat list of ``<a>`` / ``<span>`` elements.

    Each element is followed by a single space and no container element
    is emitted. The template is substituted, never escaped.
    """
    parts: list[str] = []

    if page_set.pin_first_page:
        parts.append(_link(CLASS_FIRST, _page_uri(uri_template, 1), 1))
        parts.append(f'<span class="{CLASS_ELLIPSIS_FIRST}">...</span> ')

    for page in page_set.pages:
        css_class = CLASS_PAGE
        if page == page_set.page:
            css_class = f"{CLASS_PAGE} {CLASS_SELECTED}"
        parts.append(_link(css_class, _page_uri(uri_template, page), page))

    if page_set.pin_last_page:
        parts.append(f'<span class="{CLASS_ELLIPSIS_LAST}">...</span> ')
        parts.append(
            _link(CLASS_LAST, _page_uri(uri_template, page_set.total_pages), page_set.total_pages)
        )

    return "".join(parts)
