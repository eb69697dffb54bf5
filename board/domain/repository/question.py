"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.question import Question
from board.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question entity."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Question]:
        """Find all questions, newest first."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and its answers.

        Args:
            question_id: The question ID

        Returns:
            True if a question was deleted
        """
        pass
