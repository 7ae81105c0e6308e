from __future__ import annotations

from dataclasses import dataclass

from domain.exceptions.pagination_exceptions import InvalidPaginatorOptionsError

DEFAULT_ALLOW_ALL_PARAM = "all"


@dataclass(frozen=True)
class PaginatorOptions:
    """Process-wide paginator configuration.

    ``num_page_numbers`` is the target width of the page-number strip.
    ``allow_all_param`` is the per-page value that requests every item
    unpaged; it is only honoured when ``allow_all`` is enabled.
    """

    default_per_page: int = 10
    max_per_page: int = 50
    num_page_numbers: int = 10
    page_param: str = "page"
    per_page_param: str = "per_page"
    allow_all: bool = False
    allow_all_param: str = DEFAULT_ALLOW_ALL_PARAM
    legacy_pin_flags: bool = False

    def validate(self) -> None:
        if self.default_per_page < 1:
            raise InvalidPaginatorOptionsError("default_per_page", "must be at least 1")
        if self.max_per_page < self.default_per_page:
            raise InvalidPaginatorOptionsError(
                "max_per_page",
                f"must not be lower than default_per_page ({self.default_per_page})",
            )
        if self.num_page_numbers < 1:
            raise InvalidPaginatorOptionsError("num_page_numbers", "must be at least 1")


def default_options() -> PaginatorOptions:
    """Return a ``PaginatorOptions`` with the stock defaults."""
    return PaginatorOptions()
