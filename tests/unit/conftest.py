"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from domain.models.options import PaginatorOptions
from domain.services.paginator import Paginator
from infrastructure.container import reset_container


@pytest.fixture
def options() -> PaginatorOptions:
    return PaginatorOptions()


@pytest.fixture
def paginator(options: PaginatorOptions) -> Paginator:
    return Paginator(options)


@pytest.fixture
def allow_all_paginator() -> Paginator:
    return Paginator(PaginatorOptions(allow_all=True))


@pytest.fixture
def legacy_paginator() -> Paginator:
    return Paginator(PaginatorOptions(legacy_pin_flags=True))


@pytest.fixture(autouse=True)
def _fresh_container():
    reset_container()
    yield
    reset_container()
