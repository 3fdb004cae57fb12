from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from reqlog.config import LoggingConfig, Settings, get_settings
from reqlog.main import create_app


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "HTTP_LOG_ENABLED",
        "HTTP_LOG_LEVEL",
        "HTTP_LOG_INCLUDE_USER_AGENT",
        "HTTP_LOG_INCLUDE_IP",
        "HTTP_LOG_EXCLUDE_ROUTES",
        "ENABLE_TEST_ROUTES",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[..., Any]:
    """Build a client around a fresh app with the given logging options."""

    @asynccontextmanager
    async def _make(settings: Settings | None = None, **config: Any) -> AsyncIterator[AsyncClient]:
        app = create_app(settings=settings, logging_config=LoggingConfig(**config))
        # The demo error routes raise; we want the 500 response, not the exception.
        transport = ASGITransport(app=app, raise_app_exceptions=False, client=("10.0.0.7", 4321))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return _make


@pytest.fixture
async def api_client(make_client) -> AsyncIterator[AsyncClient]:
    async with make_client() as client:
        yield client
