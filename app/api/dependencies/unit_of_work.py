"""Unit of Work: one session per request, session-scoped services from registry."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, cast

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session_maker
from app.services.post_service import PostService
from app.services.project_service import ProjectService


class UnitOfWork:
    """Holds the request's session and exposes session-scoped services from the registry."""

    def __init__(self, session: AsyncSession, services: dict[str, Any]) -> None:
        self._session = session
        self._services = services
        self._post_service: PostService | None = None
        self._project_service: ProjectService | None = None

    def _resolve(self, key: str) -> Any:
        service = self._services[key]
        if callable(service):
            return service(self._session)
        return service

    @property
    def post_service(self) -> PostService:
        """Session-scoped post service."""
        if self._post_service is None:
            self._post_service = cast(PostService, self._resolve("post_service"))
        return self._post_service

    @property
    def project_service(self) -> ProjectService:
        """Session-scoped project service."""
        if self._project_service is None:
            self._project_service = cast(ProjectService, self._resolve("project_service"))
        return self._project_service


async def get_uow(request: Request) -> AsyncIterator[UnitOfWork]:
    """Per-request dependency: one session, released on every exit path.

    The API is read-only, so nothing is committed; closing the session returns
    its connection to the pool.
    """
    session_maker = get_session_maker(request)
    async with session_maker() as session:
        yield UnitOfWork(session, request.app.state.services)
