"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Points transferred", from_user_id=..., amount=10)

    with logfire.span("ledger_service.transfer", from_user_id=...):
        ...

Verification codes and generated passwords are never passed as
attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import Settings

SERVICE_NAME = "board-core"

# Attribute names redacted on top of Logfire's defaults
SCRUB_PATTERNS = ["verification_code", "secret", "new_password", "auth_token"]

# Liveness probes would otherwise dominate the trace volume
UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    # Explicit setting wins, then token presence
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the service.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry to Logfire;
    without it everything goes to the console only.
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` overrides either way.

    Args:
        settings: Application settings
    """
    send_to_logfire = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the liveness probe."""
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, tagging them with the calling span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the notification and delivery relays."""
    logfire.instrument_httpx()
