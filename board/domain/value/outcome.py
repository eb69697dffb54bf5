"""Typed outcomes returned by core domain services.

Services report expected negative results as values; only infrastructure
faults (StoreUnavailableError) and missing entities propagate as errors.
"""

from datetime import timedelta
from typing import Optional

from board.domain.model.points_transfer import PointsTransfer
from board.domain.value.common import ValueObject
from board.domain.value.identifiers import AnswerId
from board.domain.value.types import LedgerRejection


class RateLimitDecision(ValueObject):
    """Result of consuming one unit of a rate-limited allowance."""

    allowed: bool
    retry_after: Optional[timedelta] = None

    @classmethod
    def allow(cls) -> "RateLimitDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, retry_after: timedelta) -> "RateLimitDecision":
        return cls(allowed=False, retry_after=max(retry_after, timedelta(0)))


class TransferOutcome(ValueObject):
    """Result of a points transfer: the applied record or a rejection."""

    transfer: Optional[PointsTransfer] = None
    rejection: Optional[LedgerRejection] = None

    @property
    def ok(self) -> bool:
        return self.transfer is not None

    @classmethod
    def applied(cls, transfer: PointsTransfer) -> "TransferOutcome":
        return cls(transfer=transfer)

    @classmethod
    def rejected(cls, reason: LedgerRejection) -> "TransferOutcome":
        return cls(rejection=reason)


class UpvoteOutcome(ValueObject):
    """Result of an upvote.

    ``new_count`` is a best-effort immediate value; the reconciled snapshot
    remains the source readers should trust.
    """

    answer_id: AnswerId
    new_count: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.new_count is not None
