"""PostgreSQL LISTEN/NOTIFY change feed.

Table triggers on ``questions`` and ``answers`` publish a JSON payload
``{"table": ..., "op": ..., "row": {"id": ...}}`` on the configured channel.
Each subscription holds one dedicated asyncpg connection outside the
SQLAlchemy pool, since a pooled connection cannot stay in LISTEN mode.
"""

import asyncio
from contextlib import suppress

import asyncpg
import logfire
from pydantic import ValidationError

from board.domain.error import StoreUnavailableError
from board.domain.repository import ChangeCallback, ChangeFeed, ChangeSubscription
from board.domain.value import ChangeOp, ChangeTable
from board.domain.value.change import ChangeEvent


class PostgresChangeSubscription(ChangeSubscription):
    """One LISTEN connection, re-established if the server drops it.

    After a reconnect a synthetic event is delivered, because changes made
    while disconnected were never notified.
    """

    def __init__(
        self,
        dsn: str,
        channel: str,
        callback: ChangeCallback,
        reconnect_delay_seconds: float = 2.0,
    ) -> None:
        self.dsn = dsn
        self.channel = channel
        self.callback = callback
        self.reconnect_delay_seconds = reconnect_delay_seconds
        self._connection: asyncpg.Connection | None = None
        self._reconnect_task: asyncio.Task | None = None
        self._closed = False

    async def open(self) -> None:
        """Connect and start listening.

        Raises:
            StoreUnavailableError: If the database cannot be reached
        """
        try:
            connection = await asyncpg.connect(self.dsn)
            await connection.add_listener(self.channel, self._on_notification)
        except (OSError, asyncpg.PostgresError) as e:
            raise StoreUnavailableError("change_feed.subscribe", str(e)) from e

        connection.add_termination_listener(self._on_termination)
        self._connection = connection
        logfire.info("Listening for board changes", channel=self.channel)

    async def close(self) -> None:
        """Stop listening and close the connection. Idempotent."""
        if self._closed:
            return
        self._closed = True

        if self._reconnect_task is not None:
            self._reconnect_task.cancel()
            with suppress(asyncio.CancelledError):
                await self._reconnect_task
            self._reconnect_task = None

        connection, self._connection = self._connection, None
        if connection is not None and not connection.is_closed():
            connection.remove_termination_listener(self._on_termination)
            try:
                await connection.remove_listener(self.channel, self._on_notification)
            finally:
                await connection.close()
        logfire.info("Stopped listening for board changes", channel=self.channel)

    def _on_notification(self, connection, pid: int, channel: str, payload: str) -> None:
        try:
            event = ChangeEvent.model_validate_json(payload)
        except ValidationError as e:
            logfire.warn("Malformed change payload ignored", payload=payload, error=str(e))
            return
        self.callback(event)

    def _on_termination(self, connection) -> None:
        if self._closed:
            return
        logfire.warn("Change feed connection lost, reconnecting", channel=self.channel)
        self._connection = None
        self._reconnect_task = asyncio.get_running_loop().create_task(self._reconnect())

    async def _reconnect(self) -> None:
        while not self._closed:
            await asyncio.sleep(self.reconnect_delay_seconds)
            try:
                await self.open()
            except StoreUnavailableError as e:
                logfire.warn("Change feed reconnect failed", error=str(e))
                continue
            # Anything may have changed while we were away
            self.callback(ChangeEvent(table=ChangeTable.QUESTIONS, op=ChangeOp.UPDATE))
            return


class PostgresChangeFeed(ChangeFeed):
    """Change feed backed by PostgreSQL LISTEN/NOTIFY."""

    def __init__(self, dsn: str, channel: str = "board_changes") -> None:
        """Initialize change feed.

        Args:
            dsn: Plain ``postgresql://`` DSN for asyncpg
            channel: NOTIFY channel name
        """
        self.dsn = dsn
        self.channel = channel

    async def subscribe(self, callback: ChangeCallback) -> ChangeSubscription:
        """Open a dedicated LISTEN connection delivering to ``callback``."""
        subscription = PostgresChangeSubscription(self.dsn, self.channel, callback)
        await subscription.open()
        return subscription
