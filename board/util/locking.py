"""Per-key asyncio locks.

Serializes read-check-write sequences on the same subject (user id) inside
one process. Database row locks cover the cross-process case.
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import AsyncExitStack, asynccontextmanager


class KeyedLock:
    """A lazily populated map of key -> asyncio.Lock.

    Entries are dropped once no holder or waiter references them.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._refs: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, *keys: Hashable) -> AsyncIterator[None]:
        """Acquire the locks for all keys.

        Keys are deduplicated and acquired in sorted string order so two
        callers locking the same pair can never deadlock.

        Args:
            *keys: Keys to lock

        Yields:
            None while all locks are held
        """
        ordered = sorted(set(keys), key=str)
        async with AsyncExitStack() as stack:
            for key in ordered:
                await stack.enter_async_context(self._acquire(key))
            yield

    @asynccontextmanager
    async def _acquire(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._refs[key] = self._refs.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._refs[key] -= 1
            if self._refs[key] == 0:
                del self._refs[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
