"""FastAPI application factory for the pagination service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI

from infrastructure.container import get_container
from infrastructure.observability.logging_config import setup_logging

from .api.v1 import pagination
from .errors import register_exception_handlers
from .middleware.request_logging import RequestLoggingMiddleware

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

APP_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    container = get_container()
    settings = container.settings
    setup_logging(settings.log_level, json_logs=settings.log_json)
    app.state.container = container
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Page Window Pagination Service",
        version=APP_VERSION,
        description=(
            "Turns page / per-page query parameters into offset and limit "
            "values and a bounded strip of page-number links."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(pagination.router, prefix=API_V1_PREFIX)
    register_exception_handlers(app)

    @app.get("/health", tags=["Operations"], summary="Health check", response_model=dict)
    async def health_check() -> dict[str, Any]:
        return {
            "status": "healthy",
            "version": APP_VERSION,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
