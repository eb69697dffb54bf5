"""Vote use cases."""

from .upvote_answer import UpvoteAnswerRequest, UpvoteAnswerResponse, UpvoteAnswerUseCase

__all__ = [
    "UpvoteAnswerRequest",
    "UpvoteAnswerResponse",
    "UpvoteAnswerUseCase",
]
