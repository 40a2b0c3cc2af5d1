from app.db.models.post import Post, PostType
from app.db.models.project import Project

__all__ = ["Post", "PostType", "Project"]
