"""Video storage adapters."""

from .store import InMemoryVideoStore, LocalVideoStore

__all__ = ["InMemoryVideoStore", "LocalVideoStore"]
