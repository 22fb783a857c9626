"""Shared fixtures: an in-memory store, a scripted upstream and an API client."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from hoopdex.context import AppContext
from hoopdex.main import create_app
from hoopdex.settings import AppSettings
from tests.support.fake_upstream import UPSTREAM_BASE_URL, FakeUpstream


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        database_url="sqlite+aiosqlite:///:memory:",
        upstream_api_key=None,
        upstream_base_url=UPSTREAM_BASE_URL,
        static_dir="does-not-exist",
    )


@pytest_asyncio.fixture
async def context(settings: AppSettings, upstream: FakeUpstream) -> AsyncIterator[AppContext]:
    """Application context backed by in-memory SQLite and the fake upstream."""

    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(upstream), follow_redirects=True
    )
    app_context = AppContext.from_settings(settings, http_client=http_client)
    await app_context.create_schema()
    yield app_context
    await app_context.aclose()


@pytest_asyncio.fixture
async def session(context: AppContext) -> AsyncIterator[AsyncSession]:
    async with context.session_factory() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()


@pytest.fixture
def app(context: AppContext):
    return create_app(context=context)


@pytest_asyncio.fixture
async def api_client(app) -> AsyncIterator[AsyncClient]:
    """Create an ``AsyncClient`` talking to the app over ASGI."""

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
