"""Read-side views of the board.

A snapshot is the complete, internally consistent view of questions and
their answers served to readers at one point in time.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import AnswerId, AnswerOrder, QuestionId, UserId


class AnswerView(DomainModel):
    """Answer with its author's display fields joined in."""

    id: AnswerId
    question_id: QuestionId
    body: str
    upvotes: int
    author_id: UserId
    author_email: Optional[str] = None
    created_at: datetime


class QuestionView(DomainModel):
    """Question with author display fields and its ordered answers."""

    id: QuestionId
    title: str
    body: str
    video_url: Optional[str] = None
    author_id: UserId
    author_email: Optional[str] = None
    created_at: datetime
    answers: tuple[AnswerView, ...] = ()


class BoardSnapshot(DomainModel):
    """Immutable board view; replaced wholesale, never patched."""

    questions: tuple[QuestionView, ...] = ()
    loaded_at: datetime = Field(default_factory=datetime.now)
    version: int = 0

    def find_question(self, question_id: QuestionId) -> QuestionView | None:
        """Look up a question in this snapshot."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


def _answer_sort_key(order: AnswerOrder):
    if order is AnswerOrder.TOP:
        # Most upvoted first, oldest first among equals
        return lambda a: (-a.upvotes, a.created_at, str(a.id))
    return lambda a: (a.created_at, str(a.id))


def build_snapshot(
    questions: Iterable[QuestionView],
    answers: Iterable[AnswerView],
    order: AnswerOrder = AnswerOrder.OLDEST,
    loaded_at: datetime | None = None,
) -> BoardSnapshot:
    """Assemble a snapshot from flat question and answer rows.

    Questions are ordered newest first. Answers are grouped under their
    question and ordered by ``order``; answers whose question is absent
    are dropped. Ties are broken by id so the ordering is stable across
    reloads.

    Args:
        questions: Question rows (any ``answers`` on them are ignored)
        answers: Answer rows
        order: Answer ordering within each question
        loaded_at: Load timestamp, defaults to now

    Returns:
        A fully materialized snapshot
    """
    question_list = list(questions)
    known = {q.id for q in question_list}

    grouped: dict[QuestionId, list[AnswerView]] = defaultdict(list)
    for answer in answers:
        if answer.question_id in known:
            grouped[answer.question_id].append(answer)

    key = _answer_sort_key(order)
    views = []
    for question in question_list:
        nested = sorted(grouped.get(question.id, []), key=key)
        if order is AnswerOrder.NEWEST:
            nested.reverse()
        views.append(question.model_copy(update={"answers": tuple(nested)}))

    views.sort(key=lambda q: (q.created_at, str(q.id)), reverse=True)

    return BoardSnapshot(
        questions=tuple(views),
        loaded_at=loaded_at or datetime.now(),
    )
