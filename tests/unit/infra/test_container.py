"""Tests for infrastructure.container."""

from __future__ import annotations

import pytest

from domain.exceptions.pagination_exceptions import InvalidPaginatorOptionsError
from domain.services.paginator import Paginator
from infrastructure.container import (
    ServiceContainer,
    get_container,
    get_paginator,
    reset_container,
)
from infrastructure.settings import PaginationSettings


class TestServiceContainer:
    def test_builds_paginator_from_settings(self) -> None:
        container = ServiceContainer(PaginationSettings(default_per_page=5, allow_all=True))
        assert isinstance(container.paginator, Paginator)
        assert container.paginator.options.default_per_page == 5
        assert container.paginator.options.allow_all is True

    def test_strict_options_rejected(self) -> None:
        settings = PaginationSettings(default_per_page=80, max_per_page=20, strict_options=True)
        with pytest.raises(InvalidPaginatorOptionsError):
            ServiceContainer(settings)

    def test_lenient_options_accepted(self) -> None:
        settings = PaginationSettings(default_per_page=80, max_per_page=20)
        assert ServiceContainer(settings).paginator.options.max_per_page == 20

    def test_exposes_settings(self) -> None:
        settings = PaginationSettings(num_page_numbers=4)
        assert ServiceContainer(settings).settings is settings


class TestSingleton:
    def test_get_container_is_cached(self) -> None:
        assert get_container() is get_container()

    def test_get_paginator_uses_container(self) -> None:
        assert get_paginator() is get_container().paginator

    def test_reset_installs_given_container(self) -> None:
        container = ServiceContainer(PaginationSettings(max_per_page=75))
        reset_container(container)
        assert get_container() is container
        assert get_paginator().options.max_per_page == 75

    def test_reset_clears_container(self) -> None:
        first = get_container()
        reset_container()
        assert get_container() is not first
