"""Unit tests for schema creation and one-time seeding, using mocked connections."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Insert

from app.db import bootstrap
from app.db.bootstrap import BOOTSTRAP_LOCK_KEY, initialize_content_store
from app.db.models import PostType
from app.db.seed import SEED_POSTS, SEED_PROJECTS


def _count_result(count: int) -> MagicMock:
    result = MagicMock()
    result.scalar_one.return_value = count
    return result


def _mock_connection(
    post_count: int, project_count: int, dialect: str = "postgresql"
) -> MagicMock:
    """Connection whose COUNT(*) queries report the given row counts."""
    counts = iter([post_count, project_count])

    async def execute(stmt: object, params: object = None) -> MagicMock:
        if isinstance(stmt, Insert):
            return MagicMock()
        if "count(*)" in str(stmt).lower():
            return _count_result(next(counts))
        return MagicMock()

    conn = MagicMock()
    conn.dialect.name = dialect
    conn.execute = AsyncMock(side_effect=execute)
    conn.run_sync = AsyncMock()
    return conn


def _mock_engine(conn: MagicMock) -> MagicMock:
    engine = MagicMock()
    engine.begin.return_value.__aenter__.return_value = conn
    engine.begin.return_value.__aexit__.return_value = None
    return engine


def _inserted_tables(conn: MagicMock) -> list[str]:
    statements = [call.args[0] for call in conn.execute.await_args_list]
    return [stmt.table.name for stmt in statements if isinstance(stmt, Insert)]


def test_seed_posts_match_initial_content() -> None:
    assert [post["type"] for post in SEED_POSTS] == [PostType.THINKING, PostType.DOING]
    assert [post["title"] for post in SEED_POSTS] == [
        "All I Need Is a Renaissance, Summer, and Success",
        "Why I'm Building This Notes Section",
    ]
    assert [post["date"] for post in SEED_POSTS] == ["Feb 8, 2026", "Feb 3, 2026"]
    assert [project["title"] for project in SEED_PROJECTS] == ["AI Research Lab", "Data Viz Suite"]


@pytest.mark.asyncio
async def test_empty_store_creates_schema_and_seeds_both_tables() -> None:
    conn = _mock_connection(post_count=0, project_count=0)

    assert await initialize_content_store(_mock_engine(conn)) is True

    conn.run_sync.assert_awaited_once()
    assert _inserted_tables(conn) == ["posts", "projects"]


@pytest.mark.asyncio
async def test_populated_store_is_not_reseeded() -> None:
    conn = _mock_connection(post_count=2, project_count=2)

    assert await initialize_content_store(_mock_engine(conn)) is True

    assert _inserted_tables(conn) == []


@pytest.mark.asyncio
async def test_only_empty_table_is_seeded() -> None:
    conn = _mock_connection(post_count=5, project_count=0)

    await initialize_content_store(_mock_engine(conn))

    assert _inserted_tables(conn) == ["projects"]


@pytest.mark.asyncio
async def test_advisory_lock_taken_before_anything_else() -> None:
    conn = _mock_connection(post_count=2, project_count=2)

    await initialize_content_store(_mock_engine(conn))

    first_call = conn.execute.await_args_list[0]
    assert "pg_advisory_xact_lock" in str(first_call.args[0])
    assert first_call.args[1] == {"key": BOOTSTRAP_LOCK_KEY}


@pytest.mark.asyncio
async def test_advisory_lock_skipped_on_other_dialects() -> None:
    conn = _mock_connection(post_count=2, project_count=2, dialect="sqlite")

    await initialize_content_store(_mock_engine(conn))

    statements = [str(call.args[0]) for call in conn.execute.await_args_list]
    assert not any("pg_advisory_xact_lock" in s for s in statements)


@pytest.mark.asyncio
async def test_failure_is_logged_and_swallowed(caplog: pytest.LogCaptureFixture) -> None:
    engine = MagicMock()
    engine.begin.side_effect = ConnectionRefusedError("connection refused")

    with caplog.at_level("ERROR", logger=bootstrap.__name__):
        result = await initialize_content_store(engine)

    assert result is False
    assert "Error initializing database" in caplog.text


@pytest.mark.asyncio
async def test_failure_during_seed_is_swallowed() -> None:
    conn = _mock_connection(post_count=0, project_count=0)
    conn.run_sync.side_effect = RuntimeError("permission denied for schema public")

    assert await initialize_content_store(_mock_engine(conn)) is False
    assert _inserted_tables(conn) == []
