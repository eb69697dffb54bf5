"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import (
    AuthSettings,
    LedgerSettings,
    PolicySettings,
    RateLimitSettings,
    RealtimeSettings,
    VideoSettings,
)
from board.domain.repository import (
    AnswerRepository,
    ChangeFeed,
    LoginHistoryRepository,
    PointsTransferRepository,
    QuestionRepository,
    SnapshotSource,
    UserRepository,
)
from board.domain.service import (
    ClockPolicy,
    CredentialService,
    JWTService,
    NotificationChannel,
    NotificationService,
    PointsLedgerService,
    QuestionService,
    RateLimitService,
    RealtimeReconciler,
    SecretDeliveryChannel,
    UserService,
    VideoService,
    VideoStore,
    VoteService,
)
from board.util.di.base import ProviderBase
from board.util.locking import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The lock map, the clock policy and the reconciler are process-wide.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_keyed_lock(self) -> KeyedLock:
        """Provide the process-wide per-subject lock map."""
        return KeyedLock()

    @provide(scope=Scope.APP)
    def get_clock_policy(self, policy_settings: PolicySettings) -> ClockPolicy:
        """Provide time-of-day policy."""
        return ClockPolicy(policy_settings)

    @provide(scope=Scope.APP)
    def get_realtime_reconciler(
        self,
        snapshot_source: SnapshotSource,
        change_feed: ChangeFeed,
        realtime_settings: RealtimeSettings,
    ) -> RealtimeReconciler:
        """Provide the board reconciler. Started and stopped by the app lifespan."""
        return RealtimeReconciler(
            source=snapshot_source,
            feed=change_feed,
            retry_delay_seconds=realtime_settings.retry_delay_seconds,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        login_history_repository: LoginHistoryRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            login_history_repository=login_history_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_vote_service(self, answer_repository: AnswerRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(answer_repository=answer_repository)

    @provide
    def get_rate_limit_service(
        self,
        user_repository: UserRepository,
        locks: KeyedLock,
        rate_limit_settings: RateLimitSettings,
    ) -> RateLimitService:
        """Provide password reset rate limiter."""
        return RateLimitService(
            user_repository=user_repository,
            locks=locks,
            settings=rate_limit_settings,
        )

    @provide
    def get_ledger_service(
        self,
        user_repository: UserRepository,
        transfer_repository: PointsTransferRepository,
        locks: KeyedLock,
        ledger_settings: LedgerSettings,
    ) -> PointsLedgerService:
        """Provide points ledger service."""
        return PointsLedgerService(
            user_repository=user_repository,
            transfer_repository=transfer_repository,
            locks=locks,
            minimum_standing=ledger_settings.minimum_standing,
        )

    @provide
    def get_notification_service(
        self, channel: NotificationChannel
    ) -> NotificationService:
        """Provide notification service."""
        return NotificationService(channel=channel)

    @provide
    def get_credential_service(self, channel: SecretDeliveryChannel) -> CredentialService:
        """Provide credential delivery service."""
        return CredentialService(channel=channel)

    @provide
    def get_video_service(
        self, store: VideoStore, video_settings: VideoSettings
    ) -> VideoService:
        """Provide video service."""
        return VideoService(store=store, settings=video_settings)
