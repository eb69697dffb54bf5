"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.answer import AnswerRepository
from board.domain.repository.board import (
    ChangeCallback,
    ChangeFeed,
    ChangeSubscription,
    SnapshotSource,
)
from board.domain.repository.login_history import LoginHistoryRepository
from board.domain.repository.points_transfer import PointsTransferRepository
from board.domain.repository.question import QuestionRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "PointsTransferRepository",
    "LoginHistoryRepository",
    "SnapshotSource",
    "ChangeFeed",
    "ChangeSubscription",
    "ChangeCallback",
]
