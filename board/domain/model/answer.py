"""Answer entity."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """An answer to a question.

    Upvotes only ever change through the store's atomic increment.
    """

    id: AnswerId
    question_id: QuestionId
    body: str = Field(min_length=1, max_length=10000)
    upvotes: int = Field(default=0, ge=0)
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
