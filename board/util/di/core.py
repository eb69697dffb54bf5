"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    AuthSettings,
    LedgerSettings,
    PolicySettings,
    RateLimitSettings,
    RealtimeSettings,
    Settings,
    StoreSettings,
    VerificationSettings,
    VideoSettings,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each section is also provided on its own so services depend only on
    the part they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_policy_settings(self, settings: Settings) -> PolicySettings:
        return settings.policy

    @provide
    def provide_verification_settings(self, settings: Settings) -> VerificationSettings:
        return settings.verification

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limit

    @provide
    def provide_ledger_settings(self, settings: Settings) -> LedgerSettings:
        return settings.ledger

    @provide
    def provide_realtime_settings(self, settings: Settings) -> RealtimeSettings:
        return settings.realtime

    @provide
    def provide_store_settings(self, settings: Settings) -> StoreSettings:
        return settings.store

    @provide
    def provide_video_settings(self, settings: Settings) -> VideoSettings:
        return settings.video
