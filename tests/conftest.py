"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from board.domain.model import Answer, Question, User
from board.domain.value import AnswerId, QuestionId, UserId


def make_user(email: str | None = None, points: int = 0, **fields) -> User:
    """Helper to build a test user.

    Args:
        email: Email, unique random one when omitted
        points: Starting balance
        **fields: Any other User field

    Returns:
        User value ready to save
    """
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        email=email or f"user-{str(user_id)[:8]}@example.com",
        points=points,
        **fields,
    )


def make_question(
    author_id: UserId, title: str = "Why is the sky blue?", **fields
) -> Question:
    """Helper to build a test question."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body=fields.pop("body", "Asking for a friend."),
        author_id=author_id,
        **fields,
    )


def make_answer(
    question_id: QuestionId, author_id: UserId, body: str = "Rayleigh scattering.", **fields
) -> Answer:
    """Helper to build a test answer."""
    fields.setdefault("created_at", datetime.now())
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        body=body,
        author_id=author_id,
        **fields,
    )
