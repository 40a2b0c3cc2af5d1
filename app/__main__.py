"""Run the API with uvicorn: ``python -m app``."""

from __future__ import annotations

import uvicorn

from app.main import app, settings


def main() -> None:
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
