"""Question and answer domain service."""

import logfire

from board.domain.model import Answer, Question
from board.domain.repository import AnswerRepository, QuestionRepository
from board.domain.value import AnswerId, QuestionId

from .base import Service


class QuestionService(Service):
    """Domain service for questions and their answers."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def save_question(self, question: Question) -> Question:
        """Save a question.

        Args:
            question: Question to save

        Returns:
            Saved question
        """
        with logfire.span(
            "question_service.save_question", question_id=str(question.id)
        ):
            saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=str(saved.id))
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def delete_question(self, question_id: QuestionId) -> bool:
        """Delete a question together with its answers."""
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            return await self.question_repository.delete(question_id)

    async def save_answer(self, answer: Answer) -> Answer:
        """Save an answer.

        Args:
            answer: Answer to save

        Returns:
            Saved answer
        """
        with logfire.span(
            "question_service.save_answer",
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
        ):
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer saved", answer_id=str(saved.id))
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID."""
        with logfire.span("question_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def delete_answer(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        with logfire.span("question_service.delete_answer", answer_id=str(answer_id)):
            return await self.answer_repository.delete(answer_id)
