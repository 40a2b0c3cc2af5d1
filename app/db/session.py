from __future__ import annotations

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings


def build_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the process-wide connection pool."""
    return create_async_engine(
        database_url or settings.database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker[AsyncSession](
        bind=engine, class_=AsyncSession, expire_on_commit=False
    )


def get_session_maker(request: Request) -> async_sessionmaker[AsyncSession]:
    """Return the session maker installed on the app by the lifespan."""
    session_maker: async_sessionmaker[AsyncSession] | None = getattr(
        request.app.state, "session_maker", None
    )
    if session_maker is None:
        raise RuntimeError("Database session maker is not initialized")
    return session_maker
