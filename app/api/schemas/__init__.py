"""API response schemas.

Import models from the submodules (e.g. posts, projects) or from this package
for a single entry point.
"""

from __future__ import annotations

from app.api.schemas.meta import HealthResponse
from app.api.schemas.posts import PostResponse
from app.api.schemas.projects import ProjectResponse

__all__ = [
    "HealthResponse",
    "PostResponse",
    "ProjectResponse",
]
