from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

logger = logging.getLogger(__name__)

POST_NOT_FOUND_MESSAGE = "Post not found"
DATABASE_ERROR_MESSAGE = "Database error"
VALIDATION_ERROR_MESSAGE = "Request validation failed"
RATE_LIMITED_MESSAGE = "Too many requests"


class MissingRequiredSettingsError(Exception):
    """Raised when required settings are missing."""

    def __init__(self, missing_fields: list[str]) -> None:
        """Initialize with list of missing field names."""
        self.missing_fields = missing_fields
        super().__init__(f"Missing required environment variables: {', '.join(missing_fields)}")


class InvalidSettingsError(Exception):
    """Raised when settings are invalid."""

    def __init__(self, invalid_fields: list[tuple[str, str]]) -> None:
        """Initialize with list of invalid field names and messages."""
        self.invalid_fields = invalid_fields
        summary = ", ".join(f"{field}: {message}" for field, message in invalid_fields)
        super().__init__(f"Invalid environment variables: {summary}")


class ErrorResponse(BaseModel):
    """Standardized error response payload."""

    error: str
    details: Any | None = None


def build_http_error(
    status_code: int,
    error: str,
    details: Any | None = None,
    headers: dict[str, str] | None = None,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error, details=details).model_dump(exclude_none=True),
        headers=headers,
    )


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _internal_error_response() -> JSONResponse:
    payload = ErrorResponse(error=_status_phrase(HTTP_500_INTERNAL_SERVER_ERROR)).model_dump(
        exclude_none=True
    )
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        return _internal_error_response()
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail:
        payload = ErrorResponse.model_validate(detail).model_dump(exclude_none=True)
    else:
        payload = ErrorResponse(
            error=str(detail) if detail else _status_phrase(exc.status_code),
        ).model_dump(exclude_none=True)
    return JSONResponse(
        status_code=exc.status_code,
        content=payload,
        headers=getattr(exc, "headers", None),
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return _internal_error_response()


def request_validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        return _internal_error_response()

    payload = ErrorResponse(
        error=VALIDATION_ERROR_MESSAGE,
        details=jsonable_encoder(exc.errors()),
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=422, content=payload)


def rate_limit_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = ErrorResponse(error=RATE_LIMITED_MESSAGE).model_dump(exclude_none=True)
    return JSONResponse(status_code=429, content=payload, headers=getattr(exc, "headers", None))
