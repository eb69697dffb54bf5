"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.answer import Answer
from board.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers for a question, oldest first."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Answer]:
        """Find all answers on the board."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Args:
            answer_id: The answer ID

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def increment_upvotes(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically increment an answer's upvote count by 1.

        Must be a single store-side operation, never a read-modify-write
        issued by the caller.

        Args:
            answer_id: The answer ID

        Returns:
            The new count, or None if the answer does not exist
        """
        pass
