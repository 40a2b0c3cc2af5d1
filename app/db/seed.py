"""Initial content inserted the first time each table is found empty."""

from __future__ import annotations

from typing import Any, Final

from app.db.models.post import PostType

SEED_POSTS: Final[tuple[dict[str, Any], ...]] = (
    {
        "type": PostType.THINKING.value,
        "title": "All I Need Is a Renaissance, Summer, and Success",
        "description": (
            "Sitting with winter. Belief systems that don't transfer, rejections from all "
            "directions, and the refusal to borrow someone else's definition of success."
        ),
        "content": (
            "# The Renaissance of Self\n\n"
            "Winter is a time for reflection. In this post, I explore the idea of building "
            "your own definition of success rather than borrowing one from society. \n\n"
            "### The Problem with Borrowed Success\n"
            "When we aim for what others want, we lose our own voice. \n\n"
            "### Finding Your Summer\n"
            "It's about the internal warmth that keeps you going when the external world "
            "is cold."
        ),
        "tags": "philosophy, growth, mindset",
        "date": "Feb 8, 2026",
    },
    {
        "type": PostType.DOING.value,
        "title": "Why I'm Building This Notes Section",
        "description": (
            "A meta-note on the purpose of this space—increasing focus, compounding "
            "ideas, and building in public."
        ),
        "content": (
            "# Building in Public\n\n"
            "The primary reason for building this notes section is simple: **increase focus "
            "and bandwidth toward research and growth**.\n\n"
            "### The Problem\n"
            "Ideas loop endlessly in the mind. Questions remain unexamined. Connections "
            "between concepts stay invisible because they're never written down."
        ),
        "tags": "meta, growth, focus",
        "date": "Feb 3, 2026",
    },
)

SEED_PROJECTS: Final[tuple[dict[str, Any], ...]] = (
    {
        "title": "AI Research Lab",
        "description": (
            "An interactive platform for exploring machine learning models and data "
            "science research."
        ),
        "image_url": "https://picsum.photos/seed/lab/800/600",
        "project_url": "https://example.com/lab",
        "github_url": "https://github.com/praveen/lab",
        "tags": "AI, ML, React",
    },
    {
        "title": "Data Viz Suite",
        "description": "A collection of high-performance data visualization tools built with D3.js.",
        "image_url": "https://picsum.photos/seed/viz/800/600",
        "project_url": "https://example.com/viz",
        "github_url": "https://github.com/praveen/viz",
        "tags": "D3, TypeScript, SVG",
    },
)
