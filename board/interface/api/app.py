"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from board.config import Settings
from board.domain.service import RealtimeReconciler
from board.interface.api.routes import (
    auth,
    health,
    points,
    questions,
    uploads,
    users,
    votes,
)
from board.interface.api.upload_flows import UploadFlowRegistry
from board.interface.error import register_error_handlers
from board.util.di.container import create_container, setup_di
from board.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the board reconciler for the lifetime of the application."""
    container: AsyncContainer = app.state.dishka_container
    reconciler = await container.get(RealtimeReconciler)
    await reconciler.start()
    logfire.info("Board reconciler started")
    try:
        yield
    finally:
        await reconciler.stop()
        await container.close()
        logfire.info("Board reconciler stopped")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, production providers when omitted
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Board API",
        description="Backend API for the question and answer board",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.state.upload_flows = UploadFlowRegistry(settings.verification)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(uploads.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(points.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
