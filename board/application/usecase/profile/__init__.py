"""Profile use cases."""

from .get_profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    LoginHistoryItem,
    TransferItem,
)
from .update_language import (
    UpdateLanguageRequest,
    UpdateLanguageResponse,
    UpdateLanguageUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "LoginHistoryItem",
    "TransferItem",
    "UpdateLanguageRequest",
    "UpdateLanguageResponse",
    "UpdateLanguageUseCase",
]
