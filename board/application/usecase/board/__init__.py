"""Board view use cases."""

from .get_board import GetBoardRequest, GetBoardResponse, GetBoardUseCase

__all__ = ["GetBoardRequest", "GetBoardResponse", "GetBoardUseCase"]
