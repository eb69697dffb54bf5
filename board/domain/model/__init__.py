"""Domain model entities for the board core."""

from board.domain.model.answer import Answer
from board.domain.model.login_history import LoginHistoryEntry
from board.domain.model.points_transfer import PointsTransfer
from board.domain.model.question import Question
from board.domain.model.snapshot import (
    AnswerView,
    BoardSnapshot,
    QuestionView,
    build_snapshot,
)
from board.domain.model.user import User

__all__ = [
    "User",
    "Question",
    "Answer",
    "PointsTransfer",
    "LoginHistoryEntry",
    "AnswerView",
    "QuestionView",
    "BoardSnapshot",
    "build_snapshot",
]
