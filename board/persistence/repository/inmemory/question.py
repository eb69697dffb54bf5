"""In-memory question repository for testing."""

from typing import Optional

from board.domain.model.question import Question
from board.domain.repository.question import QuestionRepository
from board.domain.value import ChangeOp, ChangeTable, QuestionId

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self.database.questions.get(question_id)

    async def find_all(self) -> list[Question]:
        """Find all questions, newest first."""
        questions = list(self.database.questions.values())
        questions.sort(key=lambda q: (q.created_at, str(q.id)), reverse=True)
        return questions

    async def save(self, question: Question) -> Question:
        """Save a new question."""
        self.database.questions[question.id] = question
        self.database.notify(ChangeTable.QUESTIONS, ChangeOp.INSERT, {"id": str(question.id)})
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and cascade to its answers."""
        if self.database.questions.pop(question_id, None) is None:
            return False

        orphans = [
            a.id for a in self.database.answers.values() if a.question_id == question_id
        ]
        for answer_id in orphans:
            del self.database.answers[answer_id]
            self.database.notify(ChangeTable.ANSWERS, ChangeOp.DELETE, {"id": str(answer_id)})

        self.database.notify(ChangeTable.QUESTIONS, ChangeOp.DELETE, {"id": str(question_id)})
        return True
