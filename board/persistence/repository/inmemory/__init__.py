"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase
from .login_history import InMemoryLoginHistoryRepository
from .points_transfer import InMemoryPointsTransferRepository
from .question import InMemoryQuestionRepository
from .snapshot import InMemorySnapshotSource
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDatabase",
    "InMemoryLoginHistoryRepository",
    "InMemoryPointsTransferRepository",
    "InMemoryQuestionRepository",
    "InMemorySnapshotSource",
    "InMemoryUserRepository",
]
