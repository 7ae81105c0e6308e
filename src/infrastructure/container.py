"""Dependency injection container for the pagination service.

Builds the process-wide ``Paginator`` from settings and exposes factory
functions suitable for FastAPI's ``Depends()`` system.
"""

from __future__ import annotations

import logging

from domain.services.paginator import Paginator
from infrastructure.settings import PaginationSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns the shared paginator."""

    def __init__(self, settings: PaginationSettings | None = None) -> None:
        self._settings = settings or get_settings()
        self.paginator = Paginator(
            self._settings.to_options(),
            strict=self._settings.strict_options,
        )
        logger.info(
            "ServiceContainer initialized (per_page=%d, max=%d, window=%d)",
            self.paginator.options.default_per_page,
            self.paginator.options.max_per_page,
            self.paginator.options.num_page_numbers,
        )

    @property
    def settings(self) -> PaginationSettings:
        return self._settings


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container(container: ServiceContainer | None = None) -> None:
    """Reset the global container, optionally to a prebuilt one (for testing)."""
    global _container
    _container = container


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_paginator() -> Paginator:
    return get_container().paginator
