from __future__ import annotations

from fastapi import APIRouter

from app.api.meta_api import router as meta_router
from app.api.posts_api import router as posts_router
from app.api.projects_api import router as projects_router

router = APIRouter()

# Include sub-routers
router.include_router(meta_router, tags=["meta"])
router.include_router(posts_router, prefix="/posts", tags=["posts"])
router.include_router(projects_router, prefix="/projects", tags=["projects"])
