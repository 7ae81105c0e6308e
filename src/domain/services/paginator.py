from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import Any

import structlog

from domain.models.options import DEFAULT_ALLOW_ALL_PARAM, PaginatorOptions
from domain.models.page_set import PageSet

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

# Per-page value that requests every item (only honoured with allow_all).
ALL_PER_PAGE = -1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> int:
    """Parse a base-10 integer query value, returning 0 when it is unusable."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        return 0
    return int(value)


def _first_value(params: Mapping[str, Any], key: str) -> Any:
    # Multi-dicts such as Starlette's QueryParams return the last value from get().
    getlist = getattr(params, "getlist", None)
    if callable(getlist):
        values = getlist(key)
        return values[0] if values else None
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class Paginator:
    """Builds ``PageSet`` instances from raw or query-string input.

    A paginator is configured once and shared read-only between requests.
    """

    def __init__(self, options: PaginatorOptions | None = None, *, strict: bool = False) -> None:
        options = options or PaginatorOptions()
        if not options.allow_all_param:
            options = dataclasses.replace(options, allow_all_param=DEFAULT_ALLOW_ALL_PARAM)
        if strict:
            options.validate()
        self._options = options

    @property
    def options(self) -> PaginatorOptions:
        return self._options

    def new(self, page: int, per_page: int) -> PageSet:
        """Return a page set for the requested *page* and *per_page*.

        A negative *per_page* requests every item when ``allow_all`` is on.
        Values below 1 otherwise fall back to ``default_per_page``, and
        without ``allow_all`` the value is capped at ``max_per_page``.
        """
        opts = self._options

        if per_page < 0 and opts.allow_all:
            per_page = 0
        elif per_page < 1:
            per_page = opts.default_per_page
        elif not opts.allow_all and per_page > opts.max_per_page:
            per_page = opts.max_per_page

        if page < 1:
            page = 1

        return PageSet(
            page=page,
            per_page=per_page,
            offset=(page - 1) * per_page,
            limit=per_page,
            options=opts,
        )

    def new_from_params(self, params: Mapping[str, Any]) -> PageSet:
        """Return a page set read from a query-parameter mapping.

        Missing or malformed numbers are treated as 0 and normalised by
        ``new``. Multi-valued entries (as produced by ``parse_qs``) use
        their first value.
        """
        opts = self._options
        raw_page = _first_value(params, opts.page_param)
        raw_per_page = _first_value(params, opts.per_page_param)

        page = parse_int(raw_page)
        if raw_per_page == opts.allow_all_param:
            per_page = ALL_PER_PAGE
        else:
            per_page = parse_int(raw_per_page)

        page_set = self.new(page, per_page)
        logger.debug(
            "page_set_derived",
            raw_page=raw_page,
            raw_per_page=raw_per_page,
            page=page_set.page,
            per_page=page_set.per_page,
        )
        return page_set
