"""Errors raised by the content services."""

from __future__ import annotations


class ContentServiceError(Exception):
    """Base error for content lookups."""

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class ContentStoreError(ContentServiceError):
    """The store could not be reached or rejected the query."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, "database_error")


class PostNotFoundError(ContentServiceError):
    """No post exists with the requested id."""

    def __init__(self, post_id: int, message: str = "Post not found") -> None:
        super().__init__(message, "post_not_found")
        self.post_id = post_id
