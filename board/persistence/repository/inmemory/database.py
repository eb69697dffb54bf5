"""Shared state for the in-memory repositories.

Plays the role of the database: repositories built on the same instance
see each other's writes, and question/answer writes fire change events
to registered listeners the way the PostgreSQL triggers do.
"""

from typing import Any

from board.domain.model import Answer, LoginHistoryEntry, PointsTransfer, Question, User
from board.domain.repository import ChangeCallback
from board.domain.value import (
    AnswerId,
    ChangeOp,
    ChangeTable,
    QuestionId,
    UserId,
)
from board.domain.value.change import ChangeEvent


class InMemoryDatabase:
    """Tables as dicts plus a listener list."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.points_transfers: list[PointsTransfer] = []
        self.login_history: list[LoginHistoryEntry] = []
        self._listeners: list[ChangeCallback] = []

    def add_listener(self, callback: ChangeCallback) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: ChangeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def notify(self, table: ChangeTable, op: ChangeOp, row: dict[str, Any]) -> None:
        """Deliver a change event to every listener."""
        event = ChangeEvent(table=table, op=op, row=row)
        for callback in list(self._listeners):
            callback(event)
