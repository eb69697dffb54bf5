#!/usr/bin/env python3
"""Serve the board API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from board.config import Settings
from board.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand the process to uvicorn."""
    settings = Settings()

    # Logfire first so import-time failures in the app are captured
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting board API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
        )
        uvicorn.run(
            "board.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Board API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
