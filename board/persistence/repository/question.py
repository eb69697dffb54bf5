"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Question
from board.domain.repository import QuestionRepository
from board.domain.value import QuestionId
from board.persistence.error import store_errors
from board.persistence.mappers import question_to_dict, row_to_question
from board.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with store_errors("question_repository.find_by_id"):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    async def find_all(self) -> List[Question]:
        """Find all questions, newest first."""
        with logfire.span("question_repository.find_all"):
            with store_errors("question_repository.find_all"):
                stmt = select(questions_table).order_by(
                    desc(questions_table.c.created_at), desc(questions_table.c.id)
                )
                result = await self.session.execute(stmt)
                questions = [row_to_question(dict(row)) for row in result.mappings()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def save(self, question: Question) -> Question:
        """Save a new question."""
        with store_errors("question_repository.save"):
            stmt = questions_table.insert().values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; answers go with it through the cascade."""
        with logfire.span("question_repository.delete", question_id=str(question_id)):
            with store_errors("question_repository.delete"):
                stmt = delete(questions_table).where(questions_table.c.id == question_id)
                result = await self.session.execute(stmt)
                await self.session.flush()
                return result.rowcount > 0
