"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.adapter.feed import PostgresChangeFeed
from board.config import RealtimeSettings, Settings
from board.domain.repository import (
    AnswerRepository,
    ChangeFeed,
    LoginHistoryRepository,
    PointsTransferRepository,
    QuestionRepository,
    SnapshotSource,
    UserRepository,
)
from board.domain.value import AnswerOrder
from board.persistence.database import create_engine, create_session_factory, raw_dsn
from board.persistence.repository import (
    PostgresAnswerRepository,
    PostgresLoginHistoryRepository,
    PostgresPointsTransferRepository,
    PostgresQuestionRepository,
    PostgresSnapshotSource,
    PostgresUserRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        Row locks taken during the request are held until then.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.APP)
    def get_snapshot_source(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        realtime_settings: RealtimeSettings,
    ) -> SnapshotSource:
        """Provide the full-refetch board source."""
        return PostgresSnapshotSource(
            session_factory, order=AnswerOrder(realtime_settings.answer_order)
        )

    @provide(scope=Scope.APP)
    def get_change_feed(self, settings: Settings) -> ChangeFeed:
        """Provide the LISTEN/NOTIFY change feed."""
        return PostgresChangeFeed(
            raw_dsn(settings.database_url), channel=settings.realtime.channel
        )

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        """Provide Answer repository."""
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_points_transfer_repository(
        self, session: AsyncSession
    ) -> PointsTransferRepository:
        """Provide PointsTransfer repository."""
        return PostgresPointsTransferRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_login_history_repository(
        self, session: AsyncSession
    ) -> LoginHistoryRepository:
        """Provide LoginHistory repository."""
        return PostgresLoginHistoryRepository(session)
