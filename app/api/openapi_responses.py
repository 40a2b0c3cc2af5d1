from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import status

from app.core.errors import (
    DATABASE_ERROR_MESSAGE,
    RATE_LIMITED_MESSAGE,
    VALIDATION_ERROR_MESSAGE,
    ErrorResponse,
)


@dataclass(frozen=True)
class ErrorExample:
    status_code: int
    error: str
    description: str
    example_name: str
    summary: str | None = None
    details: Any | None = None


def error_responses(*examples: ErrorExample) -> dict[int | str, dict[str, Any]]:
    responses: dict[int | str, dict[str, Any]] = {}
    for example in examples:
        response: dict[str, Any] | None = responses.get(example.status_code)
        if response is None:
            response = {
                "model": ErrorResponse,
                "description": example.description,
                "content": {"application/json": {"examples": {}}},
            }
            responses[example.status_code] = response

        payload: dict[str, Any] = {"error": example.error}
        if example.details is not None:
            payload["details"] = example.details

        response["content"]["application/json"]["examples"][example.example_name] = {
            "summary": example.summary or example.description,
            "value": payload,
        }

    return responses


DATABASE_ERROR = ErrorExample(
    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    error=DATABASE_ERROR_MESSAGE,
    description="Store unavailable or query failed",
    example_name="database_error",
)

RATE_LIMITED = ErrorExample(
    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    error=RATE_LIMITED_MESSAGE,
    description="Rate limit exceeded",
    example_name="rate_limited",
)


def validation_error(loc: list[str], msg: str, error_type: str) -> ErrorExample:
    return ErrorExample(
        status_code=422,
        error=VALIDATION_ERROR_MESSAGE,
        description="Invalid request parameters",
        example_name="validation_error",
        details=[{"loc": loc, "msg": msg, "type": error_type}],
    )
