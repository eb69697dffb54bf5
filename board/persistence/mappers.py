"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import (
    Answer,
    AnswerView,
    LoginHistoryEntry,
    PointsTransfer,
    Question,
    QuestionView,
    User,
)
from board.domain.value import (
    AnswerId,
    DeviceType,
    Language,
    LoginHistoryEntryId,
    PointsTransferId,
    QuestionId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        points=row["points"],
        preferred_language=Language(row["preferred_language"]),
        password_reset_count=row["password_reset_count"],
        password_reset_at=row.get("password_reset_at"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["preferred_language"] = user.preferred_language.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        video_url=row.get("video_url"),
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        upvotes=row["upvotes"],
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_points_transfer(row: Dict[str, Any]) -> PointsTransfer:
    """Convert database row to PointsTransfer domain model."""
    return PointsTransfer(
        id=PointsTransferId(_uuid(row["id"])),
        from_user_id=UserId(_uuid(row["from_user_id"])),
        to_user_id=UserId(_uuid(row["to_user_id"])),
        amount=row["amount"],
        created_at=row["created_at"],
    )


def points_transfer_to_dict(transfer: PointsTransfer) -> Dict[str, Any]:
    """Convert PointsTransfer domain model to database dict."""
    return transfer.model_dump()


def row_to_login_history_entry(row: Dict[str, Any]) -> LoginHistoryEntry:
    """Convert database row to LoginHistoryEntry domain model."""
    return LoginHistoryEntry(
        id=LoginHistoryEntryId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        device_type=DeviceType(row["device_type"]),
        browser=row["browser"],
        os=row["os"],
        ip_address=row["ip_address"],
        login_at=row["login_at"],
    )


def login_history_entry_to_dict(entry: LoginHistoryEntry) -> Dict[str, Any]:
    """Convert LoginHistoryEntry domain model to database dict."""
    data = entry.model_dump()
    data["device_type"] = entry.device_type.value
    return data


def row_to_question_view(row: Dict[str, Any]) -> QuestionView:
    """Convert a question row joined with its author's email."""
    return QuestionView(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        video_url=row.get("video_url"),
        author_id=UserId(_uuid(row["author_id"])),
        author_email=row.get("author_email"),
        created_at=row["created_at"],
    )


def row_to_answer_view(row: Dict[str, Any]) -> AnswerView:
    """Convert an answer row joined with its author's email."""
    return AnswerView(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        upvotes=row["upvotes"],
        author_id=UserId(_uuid(row["author_id"])),
        author_email=row.get("author_email"),
        created_at=row["created_at"],
    )
