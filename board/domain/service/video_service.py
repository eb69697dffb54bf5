"""Question video attachments."""

import re
from abc import ABC, abstractmethod
from datetime import datetime

import logfire

from board.config import VideoSettings
from board.domain.error import ValidationError
from board.domain.value import UserId
from board.domain.value.common import ValueObject

from .base import Service

_UNSAFE_NAME = re.compile(r"[^A-Za-z0-9._-]+")


class VideoUpload(ValueObject):
    """A video submitted with a question. Duration is probed by the client."""

    filename: str
    content_type: str = "video/mp4"
    data: bytes
    duration_seconds: float


class VideoStore(ABC):
    """Blob store for question videos."""

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str) -> str:
        """Store a video under ``key``.

        Args:
            key: Storage key
            data: Video bytes
            content_type: MIME type

        Returns:
            Public URL of the stored video
        """
        pass


def video_key(owner_id: UserId, filename: str, now: datetime) -> str:
    """Build the storage key ``{owner}/{epoch_ms}-{filename}``."""
    safe_name = _UNSAFE_NAME.sub("_", filename).strip("._") or "video"
    return f"{owner_id}/{int(now.timestamp() * 1000)}-{safe_name}"


class VideoService(Service):
    """Validates and stores question videos.

    Whether an upload is permitted at all (clock window, verification) is
    decided by the caller; this service only enforces the media limits.
    """

    def __init__(self, store: VideoStore, settings: VideoSettings) -> None:
        """Initialize video service.

        Args:
            store: Video blob store
            settings: Size and duration limits
        """
        self.store = store
        self.settings = settings

    def validate(self, video: VideoUpload) -> None:
        """Check a video against the size and duration limits.

        Raises:
            ValidationError: If the file is not a video, or breaks a limit
        """
        if not video.content_type.startswith("video/"):
            raise ValidationError("Please select a video file")
        if not video.data:
            raise ValidationError("Video file is empty")
        if len(video.data) > self.settings.max_bytes:
            limit_mb = self.settings.max_bytes // (1024 * 1024)
            raise ValidationError(f"Video must be {limit_mb}MB or smaller")
        if video.duration_seconds > self.settings.max_duration_seconds:
            limit_min = self.settings.max_duration_seconds / 60
            raise ValidationError(f"Video must be {limit_min:g} minutes or shorter")

    async def store_video(self, owner_id: UserId, video: VideoUpload, now: datetime) -> str:
        """Validate and store a video.

        Args:
            owner_id: Uploading user
            video: The video
            now: Upload time, used in the storage key

        Returns:
            Public URL of the stored video

        Raises:
            ValidationError: If the video breaks a limit
        """
        with logfire.span(
            "video_service.store_video", owner_id=str(owner_id), size=len(video.data)
        ):
            self.validate(video)
            key = video_key(owner_id, video.filename, now)
            url = await self.store.put(key, video.data, video.content_type)
            logfire.info("Video stored", owner_id=str(owner_id), key=key)
            return url
