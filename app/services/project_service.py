"""Project service - read access to the projects table."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.project import Project
from app.services.errors import ContentStoreError

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for listing projects."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_projects(self) -> list[Project]:
        """List all projects newest-inserted first."""
        try:
            result = await self._session.execute(select(Project).order_by(Project.id.desc()))
            return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to list projects")
            raise ContentStoreError() from exc


def project_service_factory_provider() -> Callable[[AsyncSession], ProjectService]:
    """Return a factory that builds a session-scoped ProjectService."""

    def factory(session: AsyncSession) -> ProjectService:
        return ProjectService(session)

    return factory
