"""In-memory answer repository for testing."""

from typing import Optional

from board.domain.model.answer import Answer
from board.domain.repository.answer import AnswerRepository
from board.domain.value import AnswerId, ChangeOp, ChangeTable, QuestionId

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self.database.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers for a question, oldest first."""
        answers = [
            a for a in self.database.answers.values() if a.question_id == question_id
        ]
        answers.sort(key=lambda a: (a.created_at, str(a.id)))
        return answers

    async def find_all(self) -> list[Answer]:
        """Find all answers on the board."""
        answers = list(self.database.answers.values())
        answers.sort(key=lambda a: (a.created_at, str(a.id)))
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Save a new answer."""
        self.database.answers[answer.id] = answer
        self.database.notify(ChangeTable.ANSWERS, ChangeOp.INSERT, {"id": str(answer.id)})
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        if self.database.answers.pop(answer_id, None) is None:
            return False
        self.database.notify(ChangeTable.ANSWERS, ChangeOp.DELETE, {"id": str(answer_id)})
        return True

    async def increment_upvotes(self, answer_id: AnswerId) -> Optional[int]:
        """Increment upvotes with no suspension point between read and write."""
        answer = self.database.answers.get(answer_id)
        if not answer:
            return None
        updated = answer.model_copy(update={"upvotes": answer.upvotes + 1})
        self.database.answers[answer_id] = updated
        self.database.notify(ChangeTable.ANSWERS, ChangeOp.UPDATE, {"id": str(answer_id)})
        return updated.upvotes
