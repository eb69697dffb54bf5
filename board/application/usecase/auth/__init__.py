"""Auth use cases."""

from .record_login import RecordLoginRequest, RecordLoginResponse, RecordLoginUseCase
from .request_password_reset import (
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
)
from .send_verification_code import (
    SendVerificationCodeRequest,
    SendVerificationCodeResponse,
    SendVerificationCodeUseCase,
)
from .verify_code import VerifyCodeRequest, VerifyCodeResponse, VerifyCodeUseCase

__all__ = [
    "RecordLoginRequest",
    "RecordLoginResponse",
    "RecordLoginUseCase",
    "RequestPasswordResetRequest",
    "RequestPasswordResetResponse",
    "RequestPasswordResetUseCase",
    "SendVerificationCodeRequest",
    "SendVerificationCodeResponse",
    "SendVerificationCodeUseCase",
    "VerifyCodeRequest",
    "VerifyCodeResponse",
    "VerifyCodeUseCase",
]
