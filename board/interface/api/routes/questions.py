"""Question and answer routes."""

import base64

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Request, status
from pydantic import BaseModel, Field

from board.application.usecase.board import (
    GetBoardRequest,
    GetBoardResponse,
    GetBoardUseCase,
)
from board.application.usecase.question import (
    AskQuestionRequest,
    AskQuestionResponse,
    AskQuestionUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from board.domain.service import JWTService, VideoUpload
from board.interface.api.session import require_user_id
from board.interface.api.upload_flows import UploadFlowRegistry

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


class VideoPayload(BaseModel):
    """Video attached to a new question, base64 encoded."""

    filename: str = Field(min_length=1, max_length=255)
    content_type: str = "video/mp4"
    data_base64: str
    duration_seconds: float = Field(ge=0)


class AskQuestionBody(BaseModel):
    """Ask question request body."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    video: VideoPayload | None = None


class CreateAnswerBody(BaseModel):
    """Create answer request body."""

    body: str = Field(min_length=1, max_length=10000)


@router.get("/questions", response_model=GetBoardResponse)
async def list_questions(
    get_board_use_case: FromDishka[GetBoardUseCase],
) -> GetBoardResponse:
    """List questions with their answers.

    Served from the live board snapshot, so reads never hit the database.
    Public endpoint.

    Args:
        get_board_use_case: Get board use case from DI

    Returns:
        Questions newest first, each with its answers
    """
    return await get_board_use_case.execute(GetBoardRequest())


@router.post(
    "/questions",
    response_model=AskQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def ask_question(
    body: AskQuestionBody,
    request: Request,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AskQuestionResponse:
    """Post a question, optionally with a video.

    Requires authentication. A video additionally requires the upload
    window to be open and the user's upload flow to be verified
    (see ``/uploads/verification``).

    Args:
        body: Question content
        request: Incoming request, for the upload flow registry
        ask_question_use_case: Ask question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created question
    """
    user_id = require_user_id(jwt_service, auth_token, "ask a question")
    flows: UploadFlowRegistry = request.app.state.upload_flows

    video = None
    gate = None
    if body.video is not None:
        try:
            data = base64.b64decode(body.video.data_base64, validate=True)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Video data is not valid base64: {e}",
            )
        video = VideoUpload(
            filename=body.video.filename,
            content_type=body.video.content_type,
            data=data,
            duration_seconds=body.video.duration_seconds,
        )
        gate = flows.peek(user_id)

    try:
        return await ask_question_use_case.execute(
            AskQuestionRequest(
                title=body.title,
                body=body.body,
                author_id=user_id,
                video=video,
                gate=gate,
            )
        )
    finally:
        # A spent gate cannot be reused even when storing the video failed
        if gate is not None and gate.spent:
            flows.discard(user_id)


@router.post(
    "/questions/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: str,
    body: CreateAnswerBody,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication. The question's author is notified.

    Args:
        question_id: Question UUID
        body: Answer content
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created answer
    """
    user_id = require_user_id(jwt_service, auth_token, "answer")

    try:
        request = CreateAnswerRequest(
            question_id=question_id,
            body=body.body,
            author_id=user_id,
        )
        return await create_answer_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
