"""Base use case."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any, TypeVar

from board.domain.error import StoreUnavailableError

T = TypeVar("T")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


async def store_timeout(awaitable: Awaitable[T], seconds: float, operation: str) -> T:
    """Await a store-bound call under an op-level timeout.

    Args:
        awaitable: The call to bound
        seconds: Timeout in seconds
        operation: Operation name for the error

    Returns:
        The call's result

    Raises:
        StoreUnavailableError: If the timeout expires
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError:
        raise StoreUnavailableError(operation, f"timed out after {seconds:g}s")
