"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board.config import Settings
from board.domain.service import RealtimeReconciler


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    realtime: bool
    board_version: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    reconciler: FromDishka[RealtimeReconciler],
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running, plus whether the
        board reconciler is live and which snapshot it is serving
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        realtime=reconciler.running,
        board_version=reconciler.snapshot.version,
    )
