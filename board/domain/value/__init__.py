"""Domain value objects for the board core."""

from board.domain.value.identifiers import (
    AnswerId,
    LoginHistoryEntryId,
    PointsTransferId,
    QuestionId,
    UserId,
)
from board.domain.value.types import (
    AnswerOrder,
    ChangeOp,
    ChangeTable,
    DeviceType,
    Language,
    LedgerRejection,
    PolicyAction,
    VerificationResult,
    VerificationState,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "PointsTransferId",
    "LoginHistoryEntryId",
    # Types
    "AnswerOrder",
    "ChangeOp",
    "ChangeTable",
    "DeviceType",
    "Language",
    "LedgerRejection",
    "PolicyAction",
    "VerificationResult",
    "VerificationState",
]
