"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Answer
from board.domain.repository import AnswerRepository
from board.domain.value import AnswerId, QuestionId
from board.persistence.error import store_errors
from board.persistence.mappers import answer_to_dict, row_to_answer
from board.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        with store_errors("answer_repository.find_by_id"):
            stmt = select(answers_table).where(answers_table.c.id == answer_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_answer(dict(row)) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers for a question, oldest first."""
        with store_errors("answer_repository.find_by_question"):
            stmt = (
                select(answers_table)
                .where(answers_table.c.question_id == question_id)
                .order_by(answers_table.c.created_at, answers_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_answer(dict(row)) for row in result.mappings()]

    async def find_all(self) -> List[Answer]:
        """Find all answers on the board."""
        with store_errors("answer_repository.find_all"):
            stmt = select(answers_table).order_by(
                answers_table.c.created_at, answers_table.c.id
            )
            result = await self.session.execute(stmt)
            return [row_to_answer(dict(row)) for row in result.mappings()]

    async def save(self, answer: Answer) -> Answer:
        """Save a new answer."""
        with store_errors("answer_repository.save"):
            stmt = answers_table.insert().values(**answer_to_dict(answer))
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        with store_errors("answer_repository.delete"):
            stmt = delete(answers_table).where(answers_table.c.id == answer_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def increment_upvotes(self, answer_id: AnswerId) -> Optional[int]:
        """Atomically increment upvotes in a single UPDATE ... RETURNING."""
        with logfire.span("answer_repository.increment_upvotes", answer_id=str(answer_id)):
            with store_errors("answer_repository.increment_upvotes"):
                stmt = (
                    update(answers_table)
                    .where(answers_table.c.id == answer_id)
                    .values(upvotes=answers_table.c.upvotes + 1)
                    .returning(answers_table.c.upvotes)
                )
                result = await self.session.execute(stmt)
                new_count = result.scalar_one_or_none()
                await self.session.flush()
                return new_count
