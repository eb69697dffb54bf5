"""User aggregate root.

Identity fields (email) are owned by the identity provider. The points
balance and the password reset counters are owned by the ledger and the
rate limiter respectively.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import Language, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    points: int = Field(default=0, ge=0)
    preferred_language: Language = Language.ENGLISH
    password_reset_count: int = Field(default=0, ge=0)
    password_reset_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
