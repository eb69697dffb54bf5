"""Integration tests for the PostgreSQL repositories.

These tests assume PostgreSQL is running and migrated
(``alembic upgrade head``).
"""

from datetime import datetime
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import PointsTransfer
from board.domain.repository import (
    AnswerRepository,
    PointsTransferRepository,
    QuestionRepository,
    SnapshotSource,
    UserRepository,
)
from board.domain.service import PointsLedgerService
from board.domain.value import Language, LedgerRejection, PointsTransferId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked external services
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text(
            "TRUNCATE TABLE login_history, points_transfers, answers, questions, users CASCADE"
        )
    )
    await session.commit()
    yield


class TestUserRepositoryIntegration:
    """Tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_email_ignores_case(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user(email="Ada@Example.com"))

        found = await user_repo.find_by_email("ada@example.COM")

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_update_language_round_trips_enum(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user())

        await user_repo.update_language(user.id, Language.HINDI)

        stored = await user_repo.find_by_id(user.id)
        assert stored.preferred_language is Language.HINDI


class TestPointsTransferRepositoryIntegration:
    """Tests for the guarded transfer write."""

    @pytest.mark.asyncio
    async def test_ledger_transfer_moves_points(self, integration_env):
        ledger = await integration_env.get(PointsLedgerService)
        user_repo = await integration_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=25))
        recipient = await user_repo.save(make_user())

        outcome = await ledger.transfer(sender.id, recipient.id, 10)

        assert outcome.ok
        assert (await user_repo.find_by_id(sender.id)).points == 15
        assert (await user_repo.find_by_id(recipient.id)).points == 10
        history = await ledger.history(recipient.id)
        assert [t.amount for t in history] == [10]

    @pytest.mark.asyncio
    async def test_ledger_rejection_writes_nothing(self, integration_env):
        ledger = await integration_env.get(PointsLedgerService)
        user_repo = await integration_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=25))
        recipient = await user_repo.save(make_user())

        outcome = await ledger.transfer(sender.id, recipient.id, 26)

        assert outcome.rejection is LedgerRejection.INSUFFICIENT_AMOUNT
        assert (await user_repo.find_by_id(sender.id)).points == 25
        assert await ledger.history(sender.id) == []

    @pytest.mark.asyncio
    async def test_guarded_debit_refuses_overdraft(self, integration_env):
        transfer_repo = await integration_env.get(PointsTransferRepository)
        user_repo = await integration_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=3))
        recipient = await user_repo.save(make_user())

        applied = await transfer_repo.apply(
            PointsTransfer(
                id=PointsTransferId(uuid4()),
                from_user_id=sender.id,
                to_user_id=recipient.id,
                amount=5,
                created_at=datetime.now(),
            )
        )

        assert applied is False
        assert (await user_repo.find_by_id(sender.id)).points == 3
        assert (await user_repo.find_by_id(recipient.id)).points == 0


class TestBoardRepositoriesIntegration:
    """Tests for questions, answers and the snapshot query."""

    @pytest.mark.asyncio
    async def test_increment_upvotes_is_atomic_per_call(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))
        answer = await answer_repo.save(make_answer(question.id, author.id))

        first = await answer_repo.increment_upvotes(answer.id)
        second = await answer_repo.increment_upvotes(answer.id)

        assert (first, second) == (1, 2)
        assert await answer_repo.increment_upvotes(uuid4()) is None

    @pytest.mark.asyncio
    async def test_snapshot_joins_author_emails(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        session = await integration_env.get(AsyncSession)
        source = await integration_env.get(SnapshotSource)
        asker = await user_repo.save(make_user(email="ada@example.com"))
        answerer = await user_repo.save(make_user(email="grace@example.com"))
        question = await question_repo.save(make_question(asker.id))
        await answer_repo.save(make_answer(question.id, answerer.id))
        await session.commit()

        snapshot = await source.load()

        assert len(snapshot.questions) == 1
        view = snapshot.questions[0]
        assert view.author_email == "ada@example.com"
        assert [a.author_email for a in view.answers] == ["grace@example.com"]
