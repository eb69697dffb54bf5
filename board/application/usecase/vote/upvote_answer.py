"""Upvote answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from board.config import StoreSettings
from board.domain.error import NotFoundError, StoreUnavailableError
from board.domain.service import NotificationService, QuestionService, VoteService
from board.domain.value import AnswerId

from ..base import BaseUseCase, store_timeout


class UpvoteAnswerRequest(BaseModel):
    """Upvote answer request."""

    answer_id: str  # UUID string


class UpvoteAnswerResponse(BaseModel):
    """Upvote answer response.

    ``upvotes`` is the count right after the increment; the board view
    catches up on its next reload.
    """

    answer_id: str
    upvotes: int


class UpvoteAnswerUseCase(BaseUseCase):
    """Use case for upvoting an answer and notifying its author."""

    def __init__(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        notification_service: NotificationService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize upvote use case.

        Args:
            vote_service: Vote domain service
            question_service: Question domain service
            notification_service: Notification domain service
            store_settings: Store call limits
        """
        self.vote_service = vote_service
        self.question_service = question_service
        self.notification_service = notification_service
        self.store_settings = store_settings

    async def execute(self, request: UpvoteAnswerRequest) -> UpvoteAnswerResponse:
        """Execute upvote flow.

        Args:
            request: Upvote answer request

        Returns:
            Upvote response with the new count

        Raises:
            NotFoundError: If the answer does not exist
            StoreUnavailableError: If the store cannot be reached in time
        """
        answer_id = AnswerId(UUID(request.answer_id))
        timeout = self.store_settings.operation_timeout_seconds

        outcome = await store_timeout(
            self.vote_service.upvote(answer_id), timeout, "upvote_answer"
        )
        if not outcome.found:
            raise NotFoundError("Answer", str(answer_id))

        await self._notify_author(answer_id, timeout)

        return UpvoteAnswerResponse(answer_id=str(answer_id), upvotes=outcome.new_count)

    async def _notify_author(self, answer_id: AnswerId, timeout: float) -> None:
        # The vote is already counted; a failed lookup only skips the notification
        try:
            answer = await store_timeout(
                self.question_service.get_answer_by_id(answer_id), timeout, "upvote_notify"
            )
            question = (
                await store_timeout(
                    self.question_service.get_question_by_id(answer.question_id),
                    timeout,
                    "upvote_notify",
                )
                if answer
                else None
            )
        except StoreUnavailableError as e:
            logfire.warn("Skipping upvote notification", answer_id=str(answer_id), error=str(e))
            return

        if answer and question:
            await self.notification_service.notify_answer_upvoted(
                answer.author_id, question.title
            )
