"""Realtime board view.

Keeps an in-memory snapshot of every question and its answers consistent
with the store. Change events are treated as invalidation signals only:
each one marks the view dirty and a single worker re-derives the whole
snapshot from the source of truth, then swaps it in.

Events that arrive while a reload is running collapse into one follow-up
reload, so a burst of N changes costs at most two loads.
"""

import asyncio
from contextlib import suppress

import logfire

from board.domain.error import StoreUnavailableError
from board.domain.model import BoardSnapshot
from board.domain.repository import ChangeFeed, ChangeSubscription, SnapshotSource
from board.domain.value.change import ChangeEvent


class RealtimeReconciler:
    """Owns the board snapshot and the background task refreshing it.

    Readers call :attr:`snapshot` and always get a complete snapshot, either
    the previous one or the next one, never a partially built view.
    """

    def __init__(
        self,
        source: SnapshotSource,
        feed: ChangeFeed,
        retry_delay_seconds: float = 2.0,
    ) -> None:
        """Initialize reconciler.

        Args:
            source: Full-refetch snapshot source
            feed: Change feed to subscribe to
            retry_delay_seconds: Pause before retrying a reload that hit a store outage
        """
        self.source = source
        self.feed = feed
        self.retry_delay_seconds = retry_delay_seconds

        self._snapshot = BoardSnapshot()
        self._subscription: ChangeSubscription | None = None
        self._worker: asyncio.Task | None = None
        self._pending = asyncio.Event()
        self._idle = asyncio.Event()
        self._idle.set()
        self._started = False
        self._stopped = False

    @property
    def snapshot(self) -> BoardSnapshot:
        """The current snapshot."""
        return self._snapshot

    @property
    def running(self) -> bool:
        return self._started and not self._stopped

    async def start(self) -> None:
        """Subscribe to the feed, load the initial snapshot and start the worker.

        The subscription is opened before the load so no change committed
        during the load can be missed. A store outage during the initial
        load is retried by the worker rather than failing startup. Any other
        failure closes the subscription and leaves the reconciler startable.

        Raises:
            RuntimeError: If the reconciler was already started
            StoreUnavailableError: If the feed subscription cannot be opened
        """
        if self._started:
            raise RuntimeError("Reconciler already started")
        self._started = True

        with logfire.span("realtime_reconciler.start"):
            self._idle.clear()
            try:
                self._subscription = await self.feed.subscribe(self._on_change)
                try:
                    await self._reload()
                except StoreUnavailableError as e:
                    logfire.warn("Initial board load failed, will retry", error=str(e))
                    self._pending.set()
            except BaseException:
                await self._abort_start()
                raise

            self._worker = asyncio.create_task(self._run(), name="realtime-reconciler")
            if not self._pending.is_set():
                self._idle.set()

            logfire.info(
                "Realtime reconciler started", questions=len(self._snapshot.questions)
            )

    async def stop(self) -> None:
        """Close the subscription and cancel any in-flight reload. Idempotent."""
        if self._stopped:
            return
        self._stopped = True

        with logfire.span("realtime_reconciler.stop"):
            if self._subscription is not None:
                await self._subscription.close()
                self._subscription = None

            if self._worker is not None:
                self._worker.cancel()
                with suppress(asyncio.CancelledError):
                    await self._worker
                self._worker = None

            self._pending.clear()
            self._idle.set()
            logfire.info("Realtime reconciler stopped")

    async def _abort_start(self) -> None:
        logfire.warn("Realtime reconciler failed to start")
        if self._subscription is not None:
            await self._subscription.close()
            self._subscription = None
        self._pending.clear()
        self._idle.set()
        self._started = False

    async def wait_for_idle(self) -> BoardSnapshot:
        """Wait until no reload is pending or running.

        Returns:
            The snapshot current at that point
        """
        await self._idle.wait()
        return self._snapshot

    def _on_change(self, event: ChangeEvent) -> None:
        if self._stopped:
            return
        logfire.debug(
            "Board change received", table=event.table.value, op=event.op.value
        )
        self._idle.clear()
        self._pending.set()

    async def _run(self) -> None:
        while True:
            await self._pending.wait()
            self._pending.clear()

            try:
                await self._reload()
            except StoreUnavailableError as e:
                logfire.warn(
                    "Board reload failed, keeping previous snapshot",
                    error=str(e),
                    retry_in_s=self.retry_delay_seconds,
                )
                await asyncio.sleep(self.retry_delay_seconds)
                self._pending.set()
                continue
            except Exception:
                logfire.exception("Unexpected error reloading board")
                await asyncio.sleep(self.retry_delay_seconds)
                self._pending.set()
                continue

            if not self._pending.is_set():
                self._idle.set()

    async def _reload(self) -> None:
        with logfire.span("realtime_reconciler.reload"):
            loaded = await self.source.load()
            # Single reference swap; readers never observe a partial build
            self._snapshot = loaded.model_copy(
                update={"version": self._snapshot.version + 1}
            )
            logfire.info(
                "Board snapshot swapped",
                version=self._snapshot.version,
                questions=len(self._snapshot.questions),
            )
