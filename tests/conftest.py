"""Shared pytest fixtures for sqlwrap unit and integration tests."""
from __future__ import annotations

import pytest
import structlog

from sqlwrap import Driver, SQLBuilder, get_settings

ALL_DRIVERS = [Driver.MYSQL, Driver.POSTGRES, Driver.SQLITE]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; reload them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def mysql() -> SQLBuilder:
    return SQLBuilder(Driver.MYSQL)


@pytest.fixture(scope="session")
def pg() -> SQLBuilder:
    return SQLBuilder(Driver.POSTGRES)


@pytest.fixture(scope="session")
def sqlite() -> SQLBuilder:
    return SQLBuilder(Driver.SQLITE)


@pytest.fixture(params=ALL_DRIVERS, ids=lambda d: d.value)
def any_builder(request) -> SQLBuilder:
    """One builder per supported dialect."""
    return SQLBuilder(request.param)
