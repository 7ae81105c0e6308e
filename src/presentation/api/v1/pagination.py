"""Pagination API endpoints and dependencies."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from domain.models.page_set import PageSet
from domain.services.paginator import Paginator
from infrastructure.container import get_paginator

from .schemas import ErrorResponse, PagePreviewResponse, PaginationMeta

router = APIRouter(prefix="/pagination", tags=["Pagination"])

DEFAULT_URI_TEMPLATE = "?page=%d"


def get_page_set(
    request: Request,
    paginator: Paginator = Depends(get_paginator),
) -> PageSet:
    """Build a ``PageSet`` from the request's query string.

    Use as ``page_set: PageSet = Depends(get_page_set)`` in list endpoints,
    then call ``page_set.set_total(...)`` once the row count is known.
    """
    return paginator.new_from_params(request.query_params)


def page_set_to_meta(page_set: PageSet) -> PaginationMeta:
    """Map a domain PageSet to the serializable pagination metadata."""
    return PaginationMeta(**page_set.to_dict())


@router.get(
    "",
    response_model=PagePreviewResponse,
    summary="Preview pagination for a result size",
    responses={
        200: {"description": "Computed page set and rendered page links."},
        400: {"description": "Unusable URI template.", "model": ErrorResponse},
        422: {"description": "Validation error.", "model": ErrorResponse},
    },
)
async def preview_pagination(
    total: int = Query(..., ge=0, description="Total number of items."),
    uri: str = Query(
        DEFAULT_URI_TEMPLATE,
        description="Link template with a single %d page-number placeholder.",
    ),
    page: str | None = Query(
        None,
        description="Requested page number; missing or malformed values mean page 1.",
    ),
    per_page: str | None = Query(
        None,
        description="Items per page, or the configured 'all' value when enabled.",
    ),
    page_set: PageSet = Depends(get_page_set),
) -> PagePreviewResponse:
    """Compute the page set for *total* items.

    ``page`` and ``per_page`` are declared for the OpenAPI schema only; the
    values are read by ``get_page_set`` under the configured parameter names
    (``page`` / ``per_page`` by default) and normalised there.
    """
    page_set.set_total(total)
    return PagePreviewResponse(
        **page_set.to_dict(),
        offset=page_set.offset,
        limit=page_set.limit,
        pages=page_set.pages,
        pin_first_page=page_set.pin_first_page,
        pin_last_page=page_set.pin_last_page,
        html=page_set.html(uri),
    )
