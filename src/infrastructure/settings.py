"""Paginator settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from domain.models.options import PaginatorOptions


class PaginationSettings(BaseSettings):
    """Central configuration for the pagination service."""

    model_config = {"env_prefix": "PAGINATION_", "case_sensitive": False}

    # Page sizes
    default_per_page: int = 10
    max_per_page: int = 50

    # Page-number strip
    num_page_numbers: int = 10
    legacy_pin_flags: bool = False

    # Query parameters
    page_param: str = "page"
    per_page_param: str = "per_page"
    allow_all: bool = False
    allow_all_param: str = "all"

    # Reject inconsistent options at startup
    strict_options: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    def to_options(self) -> PaginatorOptions:
        return PaginatorOptions(
            default_per_page=self.default_per_page,
            max_per_page=self.max_per_page,
            num_page_numbers=self.num_page_numbers,
            page_param=self.page_param,
            per_page_param=self.per_page_param,
            allow_all=self.allow_all,
            allow_all_param=self.allow_all_param,
            legacy_pin_flags=self.legacy_pin_flags,
        )


def get_settings() -> PaginationSettings:
    """Return the pagination settings read from the environment."""
    return PaginationSettings()
