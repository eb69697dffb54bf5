"""Change feed adapters."""

from .inmemory import InMemoryChangeFeed
from .postgres import PostgresChangeFeed

__all__ = ["InMemoryChangeFeed", "PostgresChangeFeed"]
