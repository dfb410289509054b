"""Shared fixtures for the CarsXE client tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio

from carsxe import AsyncCarsXE, CarsXE
from carsxe.core.config import get_settings
from tests.endpoint_cases import API_KEY


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from CARSXE_* variables set in the environment."""
    for var in ("CARSXE_API_KEY", "CARSXE_HTTP_TIMEOUT", "CARSXE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> Iterator[CarsXE]:
    with CarsXE(API_KEY) as c:
        yield c


@pytest_asyncio.fixture
async def async_client() -> AsyncIterator[AsyncCarsXE]:
    async with AsyncCarsXE(API_KEY) as c:
        yield c
