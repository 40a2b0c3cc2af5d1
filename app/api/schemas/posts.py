from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.db.models.post import PostType


class PostResponse(BaseModel):
    """A single post as stored."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 2,
                    "type": "doing",
                    "title": "Why I'm Building This Notes Section",
                    "description": "A meta-note on the purpose of this space.",
                    "content": "# Building in Public\n\n...",
                    "tags": "meta, growth, focus",
                    "date": "Feb 3, 2026",
                }
            ]
        },
    )

    id: int
    type: PostType
    title: str
    description: str | None = None
    content: str | None = Field(default=None, description="Markdown source")
    tags: str | None = Field(default=None, description="Comma-separated tag list")
    date: str = Field(..., description="Display date, free text")
