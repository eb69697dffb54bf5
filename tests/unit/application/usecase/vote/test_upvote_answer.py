"""Unit tests for UpvoteAnswerUseCase."""

import asyncio
from uuid import uuid4

import pytest

from board.application.usecase.base import store_timeout
from board.application.usecase.vote import UpvoteAnswerRequest, UpvoteAnswerUseCase
from board.domain.error import NotFoundError, StoreUnavailableError
from board.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from board.domain.service import NotificationChannel
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestUpvoteAnswer:
    """Tests for upvoting an answer."""

    @pytest.mark.asyncio
    async def test_upvote_counts_and_notifies_answer_author(self, unit_env):
        use_case = await unit_env.get(UpvoteAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        channel = await unit_env.get(NotificationChannel)
        asker = await user_repo.save(make_user())
        answerer = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id, title="Tides?"))
        answer = await answer_repo.save(make_answer(question.id, answerer.id))

        response = await use_case.execute(UpvoteAnswerRequest(answer_id=str(answer.id)))

        assert response.upvotes == 1
        recipient, notification = channel.sent[-1]
        assert recipient == answerer.id
        assert notification.title == "Answer Upvoted"
        assert notification.body == 'Your answer to "Tides?" received an upvote!'

    @pytest.mark.asyncio
    async def test_concurrent_upvotes_all_count(self, unit_env):
        use_case = await unit_env.get(UpvoteAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))
        answer = await answer_repo.save(make_answer(question.id, author.id))

        await asyncio.gather(
            *(
                use_case.execute(UpvoteAnswerRequest(answer_id=str(answer.id)))
                for _ in range(5)
            )
        )

        assert (await answer_repo.find_by_id(answer.id)).upvotes == 5

    @pytest.mark.asyncio
    async def test_upvote_missing_answer_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpvoteAnswerUseCase)
        channel = await unit_env.get(NotificationChannel)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpvoteAnswerRequest(answer_id=str(uuid4())))

        assert channel.sent == []


class TestStoreTimeout:
    """Tests for the op-level store timeout."""

    @pytest.mark.asyncio
    async def test_expired_timeout_is_store_unavailable(self):
        with pytest.raises(StoreUnavailableError, match="slow_call"):
            await store_timeout(asyncio.sleep(1), 0.01, "slow_call")

    @pytest.mark.asyncio
    async def test_result_is_returned_within_timeout(self):
        async def quick():
            return 42

        assert await store_timeout(quick(), 1, "quick_call") == 42
