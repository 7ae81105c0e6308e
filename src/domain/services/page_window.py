"""Page-number window selection.

Chooses which page numbers to show in a pagination strip so the strip
stays close to a fixed width, keeps the current page visible, and flags
when the first or last page falls outside the window.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Inclusive ``[first, last]`` run of page numbers plus pin flags."""

    first: int
    last: int
    pin_first: bool = False
    pin_last: bool = False

    def pages(self) -> list[int]:
        return list(range(self.first, self.last + 1))


def compute_page_window(
    page: int,
    total_pages: int,
    num_page_numbers: int,
    *,
    legacy_pin_flags: bool = False,
) -> PageWindow:
    """Compute the window of page numbers around *page*.

    The window is centred on *page* and clamped to ``[1, total_pages]``.
    When there are more pages than ``num_page_numbers`` it is slid towards
    whichever edge the current page is near so the strip keeps its width.
    Anchored to the right edge the window holds ``num_page_numbers + 1``
    pages; callers rely on that width, so it is kept.

    With *legacy_pin_flags* a window that stops short of the last page
    sets ``pin_first`` instead of ``pin_last``, matching older renderers
    that only ever pinned the first page.

    A width below 1 is only rejected by ``PaginatorOptions.validate``;
    a width of -2 or less yields an inverted, empty window.
    """
    # Truncate towards zero.
    if num_page_numbers < 0:
        half = -(-num_page_numbers // 2)
    else:
        half = num_page_numbers // 2

    first = max(page - half, 1)
    last = min(page + half, total_pages)

    if total_pages > num_page_numbers:
        if last < total_pages and page <= half:
            last = first + num_page_numbers - 1
        if page > total_pages - half:
            first = last - num_page_numbers

    pin_first = first != 1
    pin_last = False
    if last != total_pages:
        if legacy_pin_flags:
            pin_first = True
        else:
            pin_last = True

    return PageWindow(first=first, last=last, pin_first=pin_first, pin_last=pin_last)
