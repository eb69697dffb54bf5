"""Unit tests for AskQuestionUseCase."""

from datetime import datetime, timedelta
from uuid import UUID

import pytest

from board.application.usecase.question import AskQuestionRequest, AskQuestionUseCase
from board.domain.error import (
    PolicyDeniedError,
    ValidationError,
    VerificationRequiredError,
)
from board.domain.repository import QuestionRepository, UserRepository
from board.domain.service import VerificationGate, VideoStore, VideoUpload
from board.domain.value import PolicyAction, QuestionId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

IN_WINDOW = datetime(2026, 3, 14, 15, 30)
OUT_OF_WINDOW = datetime(2026, 3, 14, 20, 0)


def make_video(size: int = 2048, duration: float = 45.0) -> VideoUpload:
    return VideoUpload(filename="demo.mp4", data=b"v" * size, duration_seconds=duration)


def verified_gate() -> VerificationGate:
    gate = VerificationGate(expiry=timedelta(minutes=5), code_factory=lambda n: "424242")
    gate.issue()
    gate.verify("424242")
    return gate


async def seed_author(unit_env):
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(make_user())


class TestAskQuestion:
    """Tests for posting a question."""

    @pytest.mark.asyncio
    async def test_question_without_video_needs_no_verification(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = await seed_author(unit_env)

        response = await use_case.execute(
            AskQuestionRequest(
                title="Why is the sky blue?",
                body="Asking for a friend.",
                author_id=str(author.id),
                now=OUT_OF_WINDOW,
            )
        )

        assert response.video_url is None
        saved = await question_repo.find_by_id(QuestionId(UUID(response.question_id)))
        assert saved.title == "Why is the sky blue?"

    @pytest.mark.asyncio
    async def test_video_with_verified_gate_is_stored_and_gate_spent(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        store = await unit_env.get(VideoStore)
        author = await seed_author(unit_env)
        gate = verified_gate()

        response = await use_case.execute(
            AskQuestionRequest(
                title="Watch this",
                body="What is happening here?",
                author_id=str(author.id),
                video=make_video(),
                gate=gate,
                now=IN_WINDOW,
            )
        )

        assert response.video_url is not None
        assert len(store.objects) == 1
        assert not gate.can_consume

    @pytest.mark.asyncio
    async def test_second_upload_on_same_gate_requires_new_verification(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        author = await seed_author(unit_env)
        gate = verified_gate()
        request = AskQuestionRequest(
            title="Watch this",
            body="What is happening here?",
            author_id=str(author.id),
            video=make_video(),
            gate=gate,
            now=IN_WINDOW,
        )
        await use_case.execute(request)

        with pytest.raises(VerificationRequiredError):
            await use_case.execute(request)


class TestUploadRules:
    """Video uploads are gated by clock, verification and media limits."""

    @pytest.mark.asyncio
    async def test_upload_outside_window_is_denied(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        store = await unit_env.get(VideoStore)
        author = await seed_author(unit_env)
        gate = verified_gate()

        with pytest.raises(PolicyDeniedError) as exc_info:
            await use_case.execute(
                AskQuestionRequest(
                    title="Watch this",
                    body="Late night upload",
                    author_id=str(author.id),
                    video=make_video(),
                    gate=gate,
                    now=OUT_OF_WINDOW,
                )
            )

        assert exc_info.value.action is PolicyAction.UPLOAD_WINDOW
        assert "14:00" in str(exc_info.value)
        assert gate.can_consume
        assert store.objects == {}

    @pytest.mark.asyncio
    async def test_upload_without_gate_requires_verification(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        author = await seed_author(unit_env)

        with pytest.raises(VerificationRequiredError):
            await use_case.execute(
                AskQuestionRequest(
                    title="Watch this",
                    body="No verification",
                    author_id=str(author.id),
                    video=make_video(),
                    now=IN_WINDOW,
                )
            )

    @pytest.mark.asyncio
    async def test_upload_with_unverified_gate_requires_verification(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        author = await seed_author(unit_env)
        gate = VerificationGate(expiry=timedelta(minutes=5))
        gate.issue()

        with pytest.raises(VerificationRequiredError):
            await use_case.execute(
                AskQuestionRequest(
                    title="Watch this",
                    body="Code never entered",
                    author_id=str(author.id),
                    video=make_video(),
                    gate=gate,
                    now=IN_WINDOW,
                )
            )

    @pytest.mark.asyncio
    async def test_oversized_video_does_not_spend_verification(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = await seed_author(unit_env)
        gate = verified_gate()

        with pytest.raises(ValidationError):
            await use_case.execute(
                AskQuestionRequest(
                    title="Watch this",
                    body="Too long",
                    author_id=str(author.id),
                    video=make_video(duration=121),
                    gate=gate,
                    now=IN_WINDOW,
                )
            )

        assert gate.can_consume
        assert await question_repo.find_all() == []
