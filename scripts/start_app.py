#!/usr/bin/env python3
"""Serve the forum API with uvicorn.

Logfire is configured here, before uvicorn imports the app module, so that
failures during import and startup are recorded too.
"""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting forum API", environment=settings.environment, port=settings.api.port
    )
    try:
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Forum API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
