"""In-memory change feed for tests."""

from board.domain.repository import ChangeCallback, ChangeFeed, ChangeSubscription
from board.domain.value.change import ChangeEvent
from board.persistence.repository.inmemory import InMemoryDatabase


class InMemoryChangeSubscription(ChangeSubscription):
    def __init__(self, database: InMemoryDatabase, callback: ChangeCallback) -> None:
        self.database = database
        self.callback = callback
        self.closed = False

    async def close(self) -> None:
        """Detach from the database. Idempotent."""
        if self.closed:
            return
        self.closed = True
        self.database.remove_listener(self.callback)


class InMemoryChangeFeed(ChangeFeed):
    """Relays change events fired by the in-memory repositories.

    ``publish`` injects an event directly, for simulating changes made by
    another process.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()
        self.subscriptions: list[InMemoryChangeSubscription] = []

    async def subscribe(self, callback: ChangeCallback) -> ChangeSubscription:
        """Register ``callback`` for every change on the database."""
        self.database.add_listener(callback)
        subscription = InMemoryChangeSubscription(self.database, callback)
        self.subscriptions.append(subscription)
        return subscription

    def publish(self, event: ChangeEvent) -> None:
        """Deliver an event to every active subscriber."""
        self.database.notify(event.table, event.op, event.row)

    @property
    def active_subscriptions(self) -> int:
        return sum(1 for s in self.subscriptions if not s.closed)
