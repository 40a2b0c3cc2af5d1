from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProjectResponse(BaseModel):
    """A single project as stored."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "title": "AI Research Lab",
                    "description": "An interactive platform for exploring ML models.",
                    "image_url": "https://picsum.photos/seed/lab/800/600",
                    "project_url": "https://example.com/lab",
                    "github_url": "https://github.com/praveen/lab",
                    "tags": "AI, ML, React",
                }
            ]
        },
    )

    id: int
    title: str
    description: str | None = None
    image_url: str | None = None
    project_url: str | None = None
    github_url: str | None = None
    tags: str | None = Field(default=None, description="Comma-separated tag list")
