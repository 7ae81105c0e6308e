"""RFC 9457 problem responses for pagination and validation errors."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions.pagination_exceptions import PaginationError
from infrastructure.observability.logging_config import get_logger

from .api.v1.schemas import ErrorResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"
VALIDATION_ERROR_TYPE = "https://api.pagewindow.example/problems/validation-error"

logger = get_logger("pagewindow.errors")


def problem_response(request: Request, problem: ErrorResponse) -> JSONResponse:
    """Serialize *problem* for *request*, filling ``instance`` from the path."""
    if problem.instance is None:
        problem = problem.model_copy(update={"instance": request.url.path})
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": " -> ".join(str(loc) for loc in err.get("loc", [])),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


async def handle_pagination_error(request: Request, exc: PaginationError) -> JSONResponse:
    logger.warning(
        "pagination_error",
        title=exc.title,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return problem_response(
        request,
        ErrorResponse(
            type=exc.error_type,
            title=exc.title,
            status=exc.status_code,
            detail=exc.detail,
        ),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return problem_response(
        request,
        ErrorResponse(
            type=VALIDATION_ERROR_TYPE,
            title="Validation Error",
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="The request parameters failed validation.",
            errors=_field_errors(exc),
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PaginationError, handle_pagination_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
