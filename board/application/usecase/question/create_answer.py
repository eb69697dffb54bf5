"""Create answer use case."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from board.config import StoreSettings
from board.domain.error import NotFoundError
from board.domain.model import Answer
from board.domain.service import NotificationService, QuestionService
from board.domain.value import AnswerId, QuestionId, UserId

from ..base import BaseUseCase, store_timeout


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    body: str = Field(min_length=1, max_length=10000)
    author_id: str  # User ID from authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    body: str
    upvotes: int
    created_at: datetime


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        notification_service: NotificationService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize create answer use case.

        Args:
            question_service: Question domain service
            notification_service: Notification domain service
            store_settings: Store call limits
        """
        self.question_service = question_service
        self.notification_service = notification_service
        self.store_settings = store_settings

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            Create answer response

        Raises:
            NotFoundError: If the question does not exist
            StoreUnavailableError: If the store cannot be reached in time
        """
        question_id = QuestionId(UUID(request.question_id))
        timeout = self.store_settings.operation_timeout_seconds

        question = await store_timeout(
            self.question_service.get_question_by_id(question_id), timeout, "create_answer"
        )
        if not question:
            raise NotFoundError("Question", str(question_id))

        answer = Answer(
            id=AnswerId(uuid4()),
            question_id=question_id,
            body=request.body,
            upvotes=0,
            author_id=UserId(UUID(request.author_id)),
            created_at=datetime.now(),
        )
        saved = await store_timeout(
            self.question_service.save_answer(answer), timeout, "create_answer"
        )

        await self.notification_service.notify_new_answer(question.author_id, question.title)

        return CreateAnswerResponse(
            answer_id=str(saved.id),
            question_id=str(saved.question_id),
            body=saved.body,
            upvotes=saved.upvotes,
            created_at=saved.created_at,
        )
