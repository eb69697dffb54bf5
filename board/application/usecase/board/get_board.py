"""Get board use case."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import QuestionView
from board.domain.service import RealtimeReconciler

from ..base import BaseUseCase


class GetBoardRequest(BaseModel):
    """Get board request."""

    pass


class GetBoardResponse(BaseModel):
    """The current board snapshot."""

    questions: list[QuestionView]
    version: int
    loaded_at: datetime


class GetBoardUseCase(BaseUseCase):
    """Serves the reconciled board view without touching the store."""

    def __init__(self, reconciler: RealtimeReconciler) -> None:
        """Initialize get board use case.

        Args:
            reconciler: Realtime reconciler owning the snapshot
        """
        self.reconciler = reconciler

    async def execute(self, request: GetBoardRequest) -> GetBoardResponse:
        """Return the current snapshot.

        Args:
            request: Get board request

        Returns:
            Questions newest first with their ordered answers
        """
        snapshot = self.reconciler.snapshot
        return GetBoardResponse(
            questions=list(snapshot.questions),
            version=snapshot.version,
            loaded_at=snapshot.loaded_at,
        )
