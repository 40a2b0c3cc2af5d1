from __future__ import annotations

from enum import StrEnum

from sqlalchemy import CheckConstraint, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PostType(StrEnum):
    """Closed set of post categories."""

    THINKING = "thinking"
    DOING = "doing"


_POST_TYPE_VALUES = ", ".join(f"'{post_type.value}'" for post_type in PostType)


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint(f"type IN ({_POST_TYPE_VALUES})", name="posts_type_check"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[str] = mapped_column(Text)
    title: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    # Markdown source
    content: Mapped[str | None] = mapped_column(Text)
    # Comma-separated display list, e.g. "meta, growth, focus"
    tags: Mapped[str | None] = mapped_column(Text)
    # Free-text display date; listings order by id, not by this
    date: Mapped[str] = mapped_column(Text)
