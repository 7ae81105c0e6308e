from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from domain.exceptions.pagination_exceptions import NegativeTotalError
from domain.models.options import PaginatorOptions
from domain.services.page_links import render_page_links
from domain.services.page_window import compute_page_window

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class PageSet:
    """Pagination values for a single query.

    Built by ``Paginator.new``; the page-number window is only filled in
    once the caller supplies the total item count through ``set_total``.
    ``per_page == 0`` means every item is requested without a limit.
    """

    page: int = 1
    per_page: int = 0
    offset: int = 0
    limit: int = 0
    total: int = 0
    total_pages: int = 0
    pages: list[int] = field(default_factory=list)
    pin_first_page: bool = False
    pin_last_page: bool = False
    options: PaginatorOptions = field(default_factory=PaginatorOptions, repr=False)

    @property
    def is_unpaged(self) -> bool:
        return self.per_page == 0

    def set_total(self, total: int) -> None:
        """Record the total item count and compute the page-number window.

        Raises ``NegativeTotalError`` when *total* is below zero.
        """
        if total < 0:
            raise NegativeTotalError(total)

        self.total = total
        self.total_pages = 0
        self.pages = []
        self.pin_first_page = False
        self.pin_last_page = False

        # A single page (or an unpaged set) needs no page numbers.
        if self.per_page == 0 or total <= self.per_page:
            return

        self.total_pages = -(-total // self.per_page)
        window = compute_page_window(
            self.page,
            self.total_pages,
            self.options.num_page_numbers,
            legacy_pin_flags=self.options.legacy_pin_flags,
        )
        self.pages = window.pages()
        self.pin_first_page = window.pin_first
        self.pin_last_page = window.pin_last

        logger.debug(
            "page_window_computed",
            page=self.page,
            total=total,
            total_pages=self.total_pages,
            first=window.first,
            last=window.last,
        )

    def html(self, uri_template: str) -> str:
        """Render the page numbers as an HTML fragment of links.

        ``uri_template`` must contain a single ``%d`` style placeholder,
        e.g. ``/items?page=%d``.
        """
        return render_page_links(self, uri_template)

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "total": self.total,
        }
