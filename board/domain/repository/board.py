"""Read-side sources for the realtime board view."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from board.domain.model.snapshot import BoardSnapshot
from board.domain.value.change import ChangeEvent

ChangeCallback = Callable[[ChangeEvent], None]


class SnapshotSource(ABC):
    """Full-refetch source of truth for the board view."""

    @abstractmethod
    async def load(self) -> BoardSnapshot:
        """Load every question with its answers and author fields joined in.

        Returns:
            A fully materialized snapshot

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass


class ChangeSubscription(ABC):
    """Handle for an active change feed subscription."""

    @abstractmethod
    async def close(self) -> None:
        """Stop delivery and release the feed connection. Idempotent."""
        pass


class ChangeFeed(ABC):
    """Push source of row-level changes to questions and answers."""

    @abstractmethod
    async def subscribe(self, callback: ChangeCallback) -> ChangeSubscription:
        """Start delivering change events to ``callback``.

        The callback is invoked synchronously on the event loop and must
        not block.

        Args:
            callback: Receiver for change events

        Returns:
            Subscription handle
        """
        pass
