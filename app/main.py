from __future__ import annotations

import logging
import sys
import types
from importlib.metadata import PackageNotFoundError, version
from typing import cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ExceptionHandler

from app.core.errors import (
    InvalidSettingsError,
    MissingRequiredSettingsError,
    http_exception_handler,
    rate_limit_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)

# Import settings first - this may raise MissingRequiredSettingsError, and every
# other app module reads settings at import time.
try:
    from app.core.config import settings
except MissingRequiredSettingsError as e:
    print("ERROR: Missing required environment variables:", file=sys.stderr)
    for field in e.missing_fields:
        print(f"  - {field}", file=sys.stderr)
    print(
        "\nPlease set these in your .env file (see env.example for reference)",
        file=sys.stderr,
    )
    sys.exit(1)
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print(
        "\nPlease update these in your .env file (see env.example for reference)",
        file=sys.stderr,
    )
    sys.exit(1)

from app.api.router import router as api_router  # noqa: E402
from app.core.lifespan import lifespan  # noqa: E402
from app.core.logging import configure_logging  # noqa: E402
from app.core.rate_limit import limiter  # noqa: E402
from app.services.post_service import post_service_factory_provider  # noqa: E402
from app.services.project_service import project_service_factory_provider  # noqa: E402


def create_app() -> FastAPI:
    configure_logging()

    try:
        api_version = version("portfolio-api")
    except PackageNotFoundError:
        api_version = "0.1.0"  # Fallback if package not installed
        logging.warning("portfolio-api package not found, using fallback version 0.1.0")

    # Debug responses include tracebacks; only when explicitly debugging locally
    is_debug_mode = settings.environment == "local" and settings.log_level.upper() == "DEBUG"
    app = FastAPI(
        title=settings.app_name,
        version=api_version,
        debug=is_debug_mode,
        lifespan=lifespan,
    )
    app.add_exception_handler(
        StarletteHTTPException, cast(ExceptionHandler, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, request_validation_exception_handler)
    )
    app.add_exception_handler(
        RateLimitExceeded, cast(ExceptionHandler, rate_limit_exception_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.include_router(api_router, prefix="/api")

    _services = {
        "post_service": post_service_factory_provider(),
        "project_service": project_service_factory_provider(),
    }
    app.state.services = types.MappingProxyType(_services)

    return app


app = create_app()
