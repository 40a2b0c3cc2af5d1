from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.db.bootstrap import initialize_content_store
from app.db.session import build_engine, build_session_maker

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan context manager: owns the connection pool for the app's lifetime."""
    engine = build_engine()
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    try:
        # Startup
        if settings.environment != "test" and settings.seed_on_startup:
            if not await initialize_content_store(engine):
                logger.warning("Content store bootstrap failed; queries may fail until fixed")
        yield

        # Shutdown
    finally:
        await engine.dispose()
