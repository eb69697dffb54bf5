"""Question use cases."""

from .ask_question import AskQuestionRequest, AskQuestionResponse, AskQuestionUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase

__all__ = [
    "AskQuestionRequest",
    "AskQuestionResponse",
    "AskQuestionUseCase",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
]
