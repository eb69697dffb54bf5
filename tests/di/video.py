"""Mock video storage providers for testing."""

from dishka import Scope, provide

from board.adapter.video import InMemoryVideoStore
from board.domain.service import VideoStore
from board.util.di.infrastructure.video import VideoProvider


class MockVideoProvider(VideoProvider):
    """Mock video provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_video_store(self) -> VideoStore:
        """Provide in-memory video store."""
        return InMemoryVideoStore()
