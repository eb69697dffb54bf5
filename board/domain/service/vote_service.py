"""Vote domain service."""

import logfire

from board.domain.repository import AnswerRepository
from board.domain.value import AnswerId
from board.domain.value.outcome import UpvoteOutcome

from .base import Service


class VoteService(Service):
    """Domain service for answer upvotes.

    Votes are anonymous counters: there is no per-user record and a user
    may upvote the same answer any number of times.
    """

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize vote service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def upvote(self, answer_id: AnswerId) -> UpvoteOutcome:
        """Upvote an answer.

        The increment is a single atomic store operation, so concurrent
        upvotes are never lost.

        Args:
            answer_id: Answer ID

        Returns:
            Outcome with the new count, or not found

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        with logfire.span("vote_service.upvote", answer_id=str(answer_id)):
            new_count = await self.answer_repository.increment_upvotes(answer_id)
            if new_count is None:
                logfire.warn("Upvote on non-existent answer", answer_id=str(answer_id))
            else:
                logfire.info("Answer upvoted", answer_id=str(answer_id), upvotes=new_count)
            return UpvoteOutcome(answer_id=answer_id, new_count=new_count)
