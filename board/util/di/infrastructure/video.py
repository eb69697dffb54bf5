"""Video storage infrastructure providers."""

from dishka import Scope, provide

from board.adapter.video import LocalVideoStore
from board.config import VideoSettings
from board.domain.service import VideoStore
from board.util.di.base import ProviderBase


class VideoProvider(ProviderBase):
    """Video storage component base."""

    __mock_component__ = "video"


class ProdVideoProvider(VideoProvider):
    """Production video provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_video_store(self, video_settings: VideoSettings) -> VideoStore:
        """Provide video store."""
        return LocalVideoStore(root=video_settings.storage_dir)
