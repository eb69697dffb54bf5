"""PostgreSQL snapshot source for the realtime board view."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from board.domain.model import BoardSnapshot, build_snapshot
from board.domain.repository import SnapshotSource
from board.domain.value import AnswerOrder
from board.persistence.error import store_errors
from board.persistence.mappers import row_to_answer_view, row_to_question_view
from board.persistence.tables import answers_table, questions_table, users_table


class PostgresSnapshotSource(SnapshotSource):
    """Loads the whole board in one read-only transaction.

    Runs outside any request, so it owns its sessions. Both queries share
    one REPEATABLE READ transaction and therefore see the same state.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order: AnswerOrder = AnswerOrder.OLDEST,
    ) -> None:
        """Initialize snapshot source.

        Args:
            session_factory: Factory for creating database sessions
            order: Answer ordering within each question
        """
        self.session_factory = session_factory
        self.order = order

    async def load(self) -> BoardSnapshot:
        """Load every question and answer with author emails joined in."""
        with logfire.span("snapshot_source.load", order=self.order.value):
            with store_errors("snapshot_source.load"):
                async with self.session_factory() as session:
                    connection = await session.connection(
                        execution_options={
                            "isolation_level": "REPEATABLE READ",
                            "postgresql_readonly": True,
                        }
                    )
                    question_rows = await connection.execute(
                        select(questions_table, users_table.c.email.label("author_email"))
                        .select_from(
                            questions_table.outerjoin(
                                users_table, questions_table.c.author_id == users_table.c.id
                            )
                        )
                    )
                    questions = [row_to_question_view(dict(r)) for r in question_rows.mappings()]

                    answer_rows = await connection.execute(
                        select(answers_table, users_table.c.email.label("author_email"))
                        .select_from(
                            answers_table.outerjoin(
                                users_table, answers_table.c.author_id == users_table.c.id
                            )
                        )
                    )
                    answers = [row_to_answer_view(dict(r)) for r in answer_rows.mappings()]
                    await session.rollback()

            snapshot = build_snapshot(questions, answers, order=self.order)
            logfire.info(
                "Board loaded", questions=len(questions), answers=len(answers)
            )
            return snapshot
