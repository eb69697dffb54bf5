"""PostgreSQL repository implementations."""

from board.persistence.repository.answer import PostgresAnswerRepository
from board.persistence.repository.login_history import PostgresLoginHistoryRepository
from board.persistence.repository.points_transfer import (
    PostgresPointsTransferRepository,
)
from board.persistence.repository.question import PostgresQuestionRepository
from board.persistence.repository.snapshot import PostgresSnapshotSource
from board.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresPointsTransferRepository",
    "PostgresLoginHistoryRepository",
    "PostgresSnapshotSource",
]
