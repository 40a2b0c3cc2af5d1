from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import InvalidSettingsError, MissingRequiredSettingsError

_ASYNC_SCHEME = "postgresql+asyncpg"
_SYNC_SCHEMES = {"postgres", "postgresql", _ASYNC_SCHEME}
# libpq-only query parameters that asyncpg rejects
_DROPPED_QUERY_PARAMS = {"channel_binding"}


def normalize_database_url(url: str) -> str:
    """Rewrite a Postgres connection string for the asyncpg driver.

    Hosted providers hand out ``postgres://...?sslmode=require`` URLs; asyncpg
    needs the ``postgresql+asyncpg`` scheme and an ``ssl`` parameter instead.
    """
    parts = urlsplit(url.strip())
    if parts.scheme not in _SYNC_SCHEMES:
        raise ValueError("Database URL must use the postgres:// or postgresql:// scheme")
    if not parts.hostname:
        raise ValueError("Database URL must include a host")

    query: list[tuple[str, str]] = []
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key in _DROPPED_QUERY_PARAMS:
            continue
        if key == "sslmode":
            key = "ssl"
        query.append((key, value))

    return urlunsplit((_ASYNC_SCHEME, parts.netloc, parts.path, urlencode(query), parts.fragment))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required environment variables
    database_url: str = Field(..., description="Postgres connection string (required)")

    # Optional environment variables (defaults provided)
    app_name: str = "portfolio-api"
    environment: str = "local"
    log_level: str = "INFO"
    seed_on_startup: bool = True
    rate_limit_storage_url: str = "memory://"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        return normalize_database_url(value)


def validate_settings() -> Settings:
    """Validate settings and raise exception for missing required fields.

    Raises:
        MissingRequiredSettingsError: If required environment variables are missing
        InvalidSettingsError: If a variable is present but has an invalid value
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as e:
        missing_fields: list[str] = []
        for error in e.errors():
            if error["type"] == "missing":
                field_name = error["loc"][0] if error["loc"] else "unknown"
                missing_fields.append(str(field_name).upper())

        if missing_fields:
            raise MissingRequiredSettingsError(missing_fields) from e

        invalid_fields: list[tuple[str, str]] = []
        for error in e.errors():
            field_path = ".".join(str(part) for part in error.get("loc", []))
            message = error.get("msg", "Invalid value")
            invalid_fields.append((field_path.upper() or "UNKNOWN", message))

        if invalid_fields:
            raise InvalidSettingsError(invalid_fields) from e

        raise


# Validate settings at import time.
# Exceptions will propagate to the importing module (e.g., app/main.py)
settings = validate_settings()
