"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.auth import (
    RecordLoginUseCase,
    RequestPasswordResetUseCase,
    SendVerificationCodeUseCase,
    VerifyCodeUseCase,
)
from board.application.usecase.board import GetBoardUseCase
from board.application.usecase.points import TransferPointsUseCase
from board.application.usecase.profile import GetProfileUseCase, UpdateLanguageUseCase
from board.application.usecase.question import AskQuestionUseCase, CreateAnswerUseCase
from board.application.usecase.vote import UpvoteAnswerUseCase
from board.config import StoreSettings
from board.domain.service import (
    ClockPolicy,
    CredentialService,
    NotificationService,
    PointsLedgerService,
    QuestionService,
    RateLimitService,
    RealtimeReconciler,
    UserService,
    VideoService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Board use cases
    @provide
    def get_board_use_case(self, reconciler: RealtimeReconciler) -> GetBoardUseCase:
        """Provide get board use case."""
        return GetBoardUseCase(reconciler=reconciler)

    # Question use cases
    @provide
    def get_ask_question_use_case(
        self,
        question_service: QuestionService,
        video_service: VideoService,
        clock_policy: ClockPolicy,
        store_settings: StoreSettings,
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(
            question_service=question_service,
            video_service=video_service,
            clock_policy=clock_policy,
            store_settings=store_settings,
        )

    @provide
    def get_create_answer_use_case(
        self,
        question_service: QuestionService,
        notification_service: NotificationService,
        store_settings: StoreSettings,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            question_service=question_service,
            notification_service=notification_service,
            store_settings=store_settings,
        )

    # Vote use cases
    @provide
    def get_upvote_answer_use_case(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        notification_service: NotificationService,
        store_settings: StoreSettings,
    ) -> UpvoteAnswerUseCase:
        """Provide upvote answer use case."""
        return UpvoteAnswerUseCase(
            vote_service=vote_service,
            question_service=question_service,
            notification_service=notification_service,
            store_settings=store_settings,
        )

    # Auth use cases
    @provide
    def get_send_verification_code_use_case(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        store_settings: StoreSettings,
    ) -> SendVerificationCodeUseCase:
        """Provide send verification code use case."""
        return SendVerificationCodeUseCase(
            user_service=user_service,
            credential_service=credential_service,
            store_settings=store_settings,
        )

    @provide
    def get_verify_code_use_case(self) -> VerifyCodeUseCase:
        """Provide verify code use case."""
        return VerifyCodeUseCase()

    @provide
    def get_request_password_reset_use_case(
        self,
        user_service: UserService,
        rate_limit_service: RateLimitService,
        credential_service: CredentialService,
        store_settings: StoreSettings,
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(
            user_service=user_service,
            rate_limit_service=rate_limit_service,
            credential_service=credential_service,
            store_settings=store_settings,
        )

    @provide
    def get_record_login_use_case(
        self,
        user_service: UserService,
        clock_policy: ClockPolicy,
        store_settings: StoreSettings,
    ) -> RecordLoginUseCase:
        """Provide record login use case."""
        return RecordLoginUseCase(
            user_service=user_service,
            clock_policy=clock_policy,
            store_settings=store_settings,
        )

    # Points use cases
    @provide
    def get_transfer_points_use_case(
        self,
        user_service: UserService,
        ledger_service: PointsLedgerService,
        store_settings: StoreSettings,
    ) -> TransferPointsUseCase:
        """Provide transfer points use case."""
        return TransferPointsUseCase(
            user_service=user_service,
            ledger_service=ledger_service,
            store_settings=store_settings,
        )

    # Profile use cases
    @provide
    def get_profile_use_case(
        self,
        user_service: UserService,
        ledger_service: PointsLedgerService,
        store_settings: StoreSettings,
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            user_service=user_service,
            ledger_service=ledger_service,
            store_settings=store_settings,
        )

    @provide
    def get_update_language_use_case(
        self, user_service: UserService, store_settings: StoreSettings
    ) -> UpdateLanguageUseCase:
        """Provide update language use case."""
        return UpdateLanguageUseCase(
            user_service=user_service, store_settings=store_settings
        )
