"""Tests for infrastructure.settings."""

from __future__ import annotations

import pytest

from domain.models.options import PaginatorOptions
from infrastructure.settings import PaginationSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PAGINATION_DEFAULT_PER_PAGE",
        "PAGINATION_MAX_PER_PAGE",
        "PAGINATION_NUM_PAGE_NUMBERS",
        "PAGINATION_ALLOW_ALL",
        "PAGINATION_ALLOW_ALL_PARAM",
        "PAGINATION_PAGE_PARAM",
        "PAGINATION_LEGACY_PIN_FLAGS",
        "PAGINATION_STRICT_OPTIONS",
        "PAGINATION_LOG_LEVEL",
        "PAGINATION_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


class TestPaginationSettings:
    def test_defaults_match_paginator_defaults(self) -> None:
        assert PaginationSettings().to_options() == PaginatorOptions()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_MAX_PER_PAGE", "200")
        monkeypatch.setenv("PAGINATION_ALLOW_ALL", "true")
        monkeypatch.setenv("PAGINATION_PAGE_PARAM", "p")
        monkeypatch.setenv("PAGINATION_LEGACY_PIN_FLAGS", "1")

        opts = get_settings().to_options()

        assert opts.max_per_page == 200
        assert opts.allow_all is True
        assert opts.page_param == "p"
        assert opts.legacy_pin_flags is True

    def test_env_names_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("pagination_num_page_numbers", "7")
        assert get_settings().num_page_numbers == 7

    def test_explicit_values(self) -> None:
        settings = PaginationSettings(default_per_page=25, strict_options=True)
        assert settings.to_options().default_per_page == 25
        assert settings.strict_options is True
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_log_json_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_LOG_JSON", "false")
        assert get_settings().log_json is False
