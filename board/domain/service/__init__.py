"""Domain services."""

from .base import Service
from .clock_policy import ClockPolicy
from .credential_service import CredentialService, SecretDeliveryChannel, generate_password
from .jwt_service import JWTService
from .ledger_service import PointsLedgerService
from .notification_service import Notification, NotificationChannel, NotificationService
from .question_service import QuestionService
from .rate_limit_service import RateLimitService
from .realtime_reconciler import RealtimeReconciler
from .user_service import UserService
from .verification_gate import VerificationGate
from .video_service import VideoService, VideoStore, VideoUpload
from .vote_service import VoteService

__all__ = [
    "ClockPolicy",
    "CredentialService",
    "JWTService",
    "Notification",
    "NotificationChannel",
    "NotificationService",
    "PointsLedgerService",
    "QuestionService",
    "RateLimitService",
    "RealtimeReconciler",
    "SecretDeliveryChannel",
    "Service",
    "UserService",
    "VerificationGate",
    "VideoService",
    "VideoStore",
    "VideoUpload",
    "VoteService",
    "generate_password",
]
