"""Post service - read access to the posts table."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.post import Post, PostType
from app.services.errors import ContentStoreError, PostNotFoundError

logger = logging.getLogger(__name__)


class PostService:
    """Service for listing and fetching posts."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_posts(self, post_type: PostType | None = None) -> list[Post]:
        """List posts newest-inserted first, optionally restricted to one type.

        Raises:
            ContentStoreError: When the query fails.
        """
        stmt = select(Post)
        if post_type is not None:
            stmt = stmt.where(Post.type == post_type.value)
        stmt = stmt.order_by(Post.id.desc())
        try:
            result = await self._session.execute(stmt)
            return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to list posts (type=%s)", post_type)
            raise ContentStoreError() from exc

    async def get_post(self, post_id: int) -> Post:
        """Fetch one post by id.

        Raises:
            PostNotFoundError: When no post has this id.
            ContentStoreError: When the query fails.
        """
        try:
            result = await self._session.execute(select(Post).where(Post.id == post_id))
            post = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to fetch post %s", post_id)
            raise ContentStoreError() from exc

        if post is None:
            logger.debug("Post %s not found", post_id)
            raise PostNotFoundError(post_id)
        return post


def post_service_factory_provider() -> Callable[[AsyncSession], PostService]:
    """Return a factory that builds a session-scoped PostService."""

    def factory(session: AsyncSession) -> PostService:
        return PostService(session)

    return factory
