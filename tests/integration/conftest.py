"""Fixtures for tests that need a real PostgreSQL server.

Set TEST_DATABASE_URL (any postgres:// or postgresql:// URL) to run them;
otherwise they are skipped. Tables are dropped before and after each test.
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core import config
from app.core.config import normalize_database_url
from app.db.base import Base
from app.db.session import build_engine, build_session_maker
from app.main import create_app


def _test_database_url() -> str:
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL is not set")
    return normalize_database_url(url)


@pytest_asyncio.fixture
async def pg_engine() -> AsyncIterator[AsyncEngine]:
    """Engine on an empty test database (no content tables)."""
    engine = build_engine(_test_database_url())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def pg_session_maker(pg_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_maker(pg_engine)


@pytest_asyncio.fixture
async def pg_app(
    monkeypatch: pytest.MonkeyPatch,
    pg_engine: AsyncEngine,
    pg_session_maker: async_sessionmaker[AsyncSession],
) -> FastAPI:
    """App wired to the test database the way the lifespan would wire it."""
    monkeypatch.setattr(config.settings, "environment", "test")
    fastapi_app = create_app()
    fastapi_app.state.engine = pg_engine
    fastapi_app.state.session_maker = pg_session_maker
    return fastapi_app


@pytest_asyncio.fixture
async def async_http_client(pg_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Creates an async http client."""
    transport = ASGITransport(app=pg_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
