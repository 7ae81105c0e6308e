from domain.exceptions.pagination_exceptions import (
    InvalidPaginatorOptionsError,
    InvalidUriTemplateError,
    NegativeTotalError,
    PaginationError,
)

__all__ = [
    "InvalidPaginatorOptionsError",
    "InvalidUriTemplateError",
    "NegativeTotalError",
    "PaginationError",
]
