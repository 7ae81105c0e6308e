from domain.models.options import DEFAULT_ALLOW_ALL_PARAM, PaginatorOptions, default_options
from domain.models.page_set import PageSet

__all__ = [
    "DEFAULT_ALLOW_ALL_PARAM",
    "PageSet",
    "PaginatorOptions",
    "default_options",
]
