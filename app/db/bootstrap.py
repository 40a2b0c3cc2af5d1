"""Startup schema creation and one-time seeding of the content tables."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Final, cast

from sqlalchemy import Table, func, insert, select, text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from app.db.base import Base
from app.db.models import Post, Project
from app.db.seed import SEED_POSTS, SEED_PROJECTS

logger = logging.getLogger(__name__)

# Arbitrary application-wide key for pg_advisory_xact_lock
BOOTSTRAP_LOCK_KEY: Final[int] = 734_190_552


async def _acquire_bootstrap_lock(conn: AsyncConnection) -> None:
    if conn.dialect.name != "postgresql":
        return
    await conn.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": BOOTSTRAP_LOCK_KEY})


async def _seed_if_empty(
    conn: AsyncConnection, table: Table, rows: Sequence[dict[str, Any]]
) -> int:
    """Insert ``rows`` into ``table`` only when it has no rows. Returns rows inserted."""
    count = (await conn.execute(select(func.count()).select_from(table))).scalar_one()
    if count:
        logger.debug("Table %s already has %d rows, skipping seed", table.name, count)
        return 0
    await conn.execute(insert(table).values(list(rows)))
    logger.info("Seeded %d rows into %s", len(rows), table.name)
    return len(rows)


async def create_schema(conn: AsyncConnection) -> None:
    await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def seed_content(conn: AsyncConnection) -> int:
    inserted = await _seed_if_empty(conn, cast(Table, Post.__table__), SEED_POSTS)
    inserted += await _seed_if_empty(conn, cast(Table, Project.__table__), SEED_PROJECTS)
    return inserted


async def initialize_content_store(engine: AsyncEngine) -> bool:
    """Ensure the content tables exist and hold their seed rows.

    Runs in a single transaction guarded by an advisory lock, so concurrent
    initializers serialize instead of double-seeding. Failures are logged and
    reported through the return value; the caller keeps serving either way.

    Returns:
        True when the schema and seed step completed, False otherwise.
    """
    try:
        async with engine.begin() as conn:
            await _acquire_bootstrap_lock(conn)
            await create_schema(conn)
            await seed_content(conn)
    except Exception:
        logger.exception("Error initializing database")
        return False
    return True
