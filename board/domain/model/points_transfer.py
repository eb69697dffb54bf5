"""Points transfer record.

Append-only audit trail: a record exists if and only if the matching debit
and credit were applied.
"""

from datetime import datetime

from pydantic import Field, model_validator

from board.domain.model.common import DomainModel
from board.domain.value import PointsTransferId, UserId


class PointsTransfer(DomainModel):
    """Movement of points from one user to another. No fee is taken."""

    id: PointsTransferId
    from_user_id: UserId
    to_user_id: UserId
    amount: int = Field(gt=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_parties(self) -> "PointsTransfer":
        """Sender and recipient must differ."""
        if self.from_user_id == self.to_user_id:
            raise ValueError("Sender and recipient must be different users")
        return self
