"""Ask question use case."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from board.config import StoreSettings
from board.domain.error import PolicyDeniedError, VerificationRequiredError
from board.domain.model import Question
from board.domain.service import (
    ClockPolicy,
    QuestionService,
    VerificationGate,
    VideoService,
    VideoUpload,
)
from board.domain.value import PolicyAction, QuestionId, UserId

from ..base import BaseUseCase, store_timeout


class AskQuestionRequest(BaseModel):
    """Ask question request.

    ``gate`` is the verification gate of the current upload flow; it is
    only consulted when a video is attached.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    author_id: str  # User ID from authenticated user
    video: VideoUpload | None = None
    gate: VerificationGate | None = None
    now: datetime | None = None


class AskQuestionResponse(BaseModel):
    """Ask question response."""

    question_id: str
    title: str
    video_url: str | None
    created_at: datetime


class AskQuestionUseCase(BaseUseCase):
    """Use case for posting a question, optionally with a video."""

    def __init__(
        self,
        question_service: QuestionService,
        video_service: VideoService,
        clock_policy: ClockPolicy,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
            video_service: Video domain service
            clock_policy: Time-of-day policy
            store_settings: Store call limits
        """
        self.question_service = question_service
        self.video_service = video_service
        self.clock_policy = clock_policy
        self.store_settings = store_settings

    async def execute(self, request: AskQuestionRequest) -> AskQuestionResponse:
        """Execute ask question flow.

        Steps when a video is attached:
        1. Upload window must be open
        2. The flow's verification must be complete and unspent
        3. Video must be within the size and duration limits
        4. Verification is consumed and the video stored

        Args:
            request: Ask question request

        Returns:
            Ask question response

        Raises:
            PolicyDeniedError: If uploading outside the upload window
            VerificationRequiredError: If the flow is not verified
            ValidationError: If the video breaks a limit
            StoreUnavailableError: If the store cannot be reached in time
        """
        now = request.now or datetime.now()
        author_id = UserId(UUID(request.author_id))
        timeout = self.store_settings.operation_timeout_seconds

        video_url = None
        if request.video is not None:
            if not self.clock_policy.allowed(PolicyAction.UPLOAD_WINDOW, now):
                window = self.clock_policy.window(PolicyAction.UPLOAD_WINDOW)
                raise PolicyDeniedError(
                    PolicyAction.UPLOAD_WINDOW, window.start_hour, window.end_hour
                )
            if request.gate is None or not request.gate.can_consume:
                raise VerificationRequiredError()

            self.video_service.validate(request.video)
            request.gate.consume()
            video_url = await self.video_service.store_video(author_id, request.video, now)

        question = Question(
            id=QuestionId(uuid4()),
            title=request.title,
            body=request.body,
            video_url=video_url,
            author_id=author_id,
            created_at=now,
        )
        saved = await store_timeout(
            self.question_service.save_question(question), timeout, "ask_question"
        )

        return AskQuestionResponse(
            question_id=str(saved.id),
            title=saved.title,
            video_url=saved.video_url,
            created_at=saved.created_at,
        )
