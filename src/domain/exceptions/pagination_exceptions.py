from __future__ import annotations


class PaginationError(Exception):
    """Base class for all pagination errors.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Pagination Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidPaginatorOptionsError(PaginationError):
    def __init__(self, field: str = "", reason: str = "") -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            detail=f"Invalid paginator option '{field}': {reason}",
            title="Invalid Paginator Options",
            status_code=500,
            error_type="https://api.pagewindow.example/problems/invalid-options",
        )


class InvalidUriTemplateError(PaginationError):
    def __init__(self, template: str = "", reason: str = "") -> None:
        self.template = template
        self.reason = reason
        super().__init__(
            detail=f"Unusable page URI template '{template}': {reason}",
            title="Invalid URI Template",
            status_code=400,
            error_type="https://api.pagewindow.example/problems/invalid-uri-template",
        )


class NegativeTotalError(PaginationError):
    def __init__(self, total: int = 0) -> None:
        self.total = total
        super().__init__(
            detail=f"Total item count cannot be negative: {total}",
            title="Negative Total",
            status_code=400,
            error_type="https://api.pagewindow.example/problems/negative-total",
        )
