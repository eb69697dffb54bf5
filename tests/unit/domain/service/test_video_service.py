"""Unit tests for VideoService."""

from datetime import datetime
from uuid import uuid4

import pytest

from board.adapter.video import InMemoryVideoStore
from board.config import VideoSettings
from board.domain.error import ValidationError
from board.domain.service import VideoService, VideoUpload
from board.domain.service.video_service import video_key
from board.domain.value import UserId

MB = 1024 * 1024


def make_video(size: int = 1024, duration: float = 30.0, filename: str = "clip.mp4"):
    return VideoUpload(filename=filename, data=b"x" * size, duration_seconds=duration)


@pytest.fixture
def store():
    return InMemoryVideoStore()


@pytest.fixture
def service(store):
    return VideoService(store=store, settings=VideoSettings())


class TestValidate:
    """Tests for the media limits."""

    def test_video_within_limits_passes(self, service):
        service.validate(make_video(size=50 * MB, duration=120))

    def test_oversized_video_is_rejected(self, service):
        with pytest.raises(ValidationError, match="50MB"):
            service.validate(make_video(size=50 * MB + 1))

    def test_overlong_video_is_rejected(self, service):
        with pytest.raises(ValidationError, match="2 minutes"):
            service.validate(make_video(duration=120.5))

    def test_empty_video_is_rejected(self, service):
        with pytest.raises(ValidationError):
            service.validate(make_video(size=0))

    def test_non_video_file_is_rejected(self, service):
        upload = VideoUpload(
            filename="notes.pdf",
            content_type="application/pdf",
            data=b"%PDF",
            duration_seconds=0,
        )

        with pytest.raises(ValidationError, match="video file"):
            service.validate(upload)


class TestStoreVideo:
    """Tests for store_video."""

    @pytest.mark.asyncio
    async def test_store_video_writes_under_owner_key(self, service, store):
        owner_id = UserId(uuid4())
        now = datetime(2026, 3, 14, 15, 0)

        url = await service.store_video(owner_id, make_video(), now)

        key = video_key(owner_id, "clip.mp4", now)
        assert key in store.objects
        assert url == f"memory://videos/{key}"

    def test_key_strips_path_components(self):
        owner_id = UserId(uuid4())
        now = datetime(2026, 3, 14, 15, 0)

        key = video_key(owner_id, "../../etc/passwd", now)

        assert key.startswith(f"{owner_id}/")
        assert "/" not in key.split("/", 1)[1]
        assert ".." not in key
