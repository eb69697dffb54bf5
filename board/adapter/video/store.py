"""Video stores.

Stores accept writes unconditionally; upload rules are enforced before a
store is ever called.
"""

import asyncio
from pathlib import Path

import logfire

from board.adapter.error import VideoStorageError
from board.domain.service.video_service import VideoStore


class LocalVideoStore(VideoStore):
    """Writes videos under a local directory."""

    def __init__(self, root: str | Path, base_url: str = "/videos") -> None:
        """Initialize local store.

        Args:
            root: Directory videos are written under
            base_url: URL prefix the directory is served from
        """
        self.root = Path(root).resolve()
        self.base_url = base_url.rstrip("/")

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        """Write a video to ``root/key``.

        Raises:
            VideoStorageError: If the key escapes the root or the write fails
        """
        path = (self.root / key).resolve()
        if self.root not in path.parents:
            raise VideoStorageError(f"Invalid video key: {key}")

        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            logfire.error("Video write failed", key=key, error=str(e))
            raise VideoStorageError(f"Could not store video: {e}")

        return f"{self.base_url}/{key}"

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


class InMemoryVideoStore(VideoStore):
    """Keeps videos in a dict, for tests."""

    def __init__(self, base_url: str = "memory://videos") -> None:
        self.base_url = base_url
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        """Store a video in memory."""
        self.objects[key] = (data, content_type)
        return f"{self.base_url}/{key}"
