"""
Structured logging for the pagination service.

structlog events and plain ``logging`` records share one processor chain
and one stdout handler. Page-set derivation and window computation log at
DEBUG, requests and problem responses at INFO / WARNING. Rendering is JSON
unless ``PAGINATION_LOG_JSON`` is turned off for local development.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SERVICE_NAME: str = "pagewindow"

# The request logging middleware already records every request.
_SILENCED_LOGGERS: tuple[str, ...] = ("uvicorn.access",)


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Inject the service name into every log event."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stdout_handler(pre_chain: list[structlog.types.Processor], json_logs: bool) -> logging.Handler:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def setup_logging(log_level: str = "INFO", *, json_logs: bool = True) -> None:
    """Install the structlog configuration and the root stdout handler.

    Unknown level names fall back to ``INFO``. Call once at startup; the
    FastAPI lifespan does so with the values from ``PaginationSettings``.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stdout_handler(pre_chain, json_logs)]
    root.setLevel(level)

    for name in _SILENCED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named *name* for the presentation layer."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
