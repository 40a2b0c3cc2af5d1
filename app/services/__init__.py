from app.services.errors import ContentServiceError, ContentStoreError, PostNotFoundError
from app.services.post_service import PostService, post_service_factory_provider
from app.services.project_service import ProjectService, project_service_factory_provider

__all__ = [
    "ContentServiceError",
    "ContentStoreError",
    "PostNotFoundError",
    "PostService",
    "ProjectService",
    "post_service_factory_provider",
    "project_service_factory_provider",
]
