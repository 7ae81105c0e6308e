"""
Pydantic v2 response schemas for the pagination API.

Error responses follow RFC 9457 Problem Details.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _SnakeModel(BaseModel):
    """Base model using snake_case field names throughout."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={"$schema": "https://json-schema.org/draft/2020-12/schema"},
    )


class PaginationMeta(_SnakeModel):
    """Serializable pagination values embedded in list responses."""

    page: int = Field(..., ge=1, description="Current page number (1-indexed).")
    per_page: int = Field(..., ge=0, description="Items per page; 0 means all items.")
    total_pages: int = Field(
        ..., ge=0, description="Number of pages; 0 when everything fits on one page."
    )
    total: int = Field(..., ge=0, description="Total number of items across all pages.")


class PagePreviewResponse(PaginationMeta):
    """Full page-set state including the rendered page-number strip."""

    offset: int = Field(..., ge=0, description="Rows to skip for the current page.")
    limit: int = Field(..., ge=0, description="Rows to fetch; 0 means no limit.")
    pages: list[int] = Field(default_factory=list, description="Page numbers to display.")
    pin_first_page: bool = Field(False, description="Window excludes the first page.")
    pin_last_page: bool = Field(False, description="Window excludes the last page.")
    html: str = Field("", description="Rendered link list fragment.")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "page": 8,
                    "per_page": 10,
                    "total_pages": 20,
                    "total": 195,
                    "offset": 70,
                    "limit": 10,
                    "pages": [3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13],
                    "pin_first_page": True,
                    "pin_last_page": True,
                    "html": '<a class="pg-page-first" href="?page=1">1</a> ...',
                }
            ]
        }
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_SnakeModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.pagewindow.example/problems/invalid-uri-template"],
    )
    title: str = Field(..., description="Short, human-readable summary.")
    status: int = Field(..., ge=400, le=599, description="HTTP status code.")
    detail: str | None = Field(None, description="Explanation specific to this occurrence.")
    instance: str | None = Field(None, description="URI reference of the occurrence.")
    errors: list[dict[str, Any]] | None = Field(None, description="Field-level errors.")
