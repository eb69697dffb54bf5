"""In-memory snapshot source for testing."""

from board.domain.model import AnswerView, BoardSnapshot, QuestionView, build_snapshot
from board.domain.repository import SnapshotSource
from board.domain.value import AnswerOrder

from .database import InMemoryDatabase


class InMemorySnapshotSource(SnapshotSource):
    """Builds a snapshot from the shared in-memory tables."""

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        order: AnswerOrder = AnswerOrder.OLDEST,
    ) -> None:
        self.database = database or InMemoryDatabase()
        self.order = order

    async def load(self) -> BoardSnapshot:
        """Copy every question and answer with author emails joined in."""
        users = self.database.users

        def email_of(user_id):
            user = users.get(user_id)
            return user.email if user else None

        questions = [
            QuestionView(**q.model_dump(), author_email=email_of(q.author_id))
            for q in self.database.questions.values()
        ]
        answers = [
            AnswerView(**a.model_dump(), author_email=email_of(a.author_id))
            for a in self.database.answers.values()
        ]
        return build_snapshot(questions, answers, order=self.order)
