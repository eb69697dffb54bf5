"""Question entity.

Questions are immutable after creation; deletion happens upstream.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import QuestionId, UserId


class Question(DomainModel):
    """A question posted to the board, optionally with a short video."""

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    video_url: Optional[str] = None
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
