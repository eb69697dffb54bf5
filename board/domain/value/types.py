"""Domain value types for the board core.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum


class Language(str, Enum):
    """Supported interface languages.

    A closed set: preferences outside it are rejected, not stored as free text.
    """

    ENGLISH = "en"
    SPANISH = "es"
    HINDI = "hi"
    PORTUGUESE = "pt"
    CHINESE = "zh"
    FRENCH = "fr"


class DeviceType(str, Enum):
    """Device classification recorded with each sign-in."""

    MOBILE = "mobile"
    DESKTOP = "desktop"

    @classmethod
    def from_user_agent(cls, user_agent: str) -> "DeviceType":
        """Classify a user agent string."""
        if _MOBILE_AGENT.search(user_agent):
            return cls.MOBILE
        return cls.DESKTOP


_MOBILE_AGENT = re.compile(r"Mobile|Tablet|iPad|iPhone|Android")


class PolicyAction(str, Enum):
    """Actions restricted to a clock-hour window."""

    UPLOAD_WINDOW = "upload_window"
    MOBILE_ACCESS_WINDOW = "mobile_access_window"

    @property
    def label(self) -> str:
        """Human-readable action name for messages."""
        if self is PolicyAction.UPLOAD_WINDOW:
            return "Video upload"
        return "Mobile access"


class LedgerRejection(str, Enum):
    """Reasons a points transfer is refused."""

    AMOUNT_NOT_POSITIVE = "amount_not_positive"
    SELF_TRANSFER = "self_transfer"
    INSUFFICIENT_STANDING = "insufficient_standing"
    INSUFFICIENT_AMOUNT = "insufficient_amount"
    RECIPIENT_NOT_FOUND = "recipient_not_found"

    @property
    def message(self) -> str:
        """User-facing message for the rejection."""
        return _LEDGER_MESSAGES[self]


_LEDGER_MESSAGES = {
    LedgerRejection.AMOUNT_NOT_POSITIVE: "Transfer amount must be positive",
    LedgerRejection.SELF_TRANSFER: "You cannot transfer points to yourself",
    LedgerRejection.INSUFFICIENT_STANDING: "You need at least 10 points to transfer",
    LedgerRejection.INSUFFICIENT_AMOUNT: "Insufficient points",
    LedgerRejection.RECIPIENT_NOT_FOUND: "Recipient not found",
}


class ChangeTable(str, Enum):
    """Collections observed by the change feed."""

    QUESTIONS = "questions"
    ANSWERS = "answers"


class ChangeOp(str, Enum):
    """Row-level change operations."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class AnswerOrder(str, Enum):
    """Ordering of answers nested under a question."""

    OLDEST = "oldest"
    NEWEST = "newest"
    TOP = "top"


class VerificationState(str, Enum):
    """Lifecycle of a verification gate."""

    IDLE = "idle"
    ISSUED = "issued"
    VERIFIED = "verified"
    EXPIRED = "expired"


class VerificationResult(str, Enum):
    """Outcome of a single verify attempt."""

    VERIFIED = "verified"
    MISMATCH = "mismatch"
    EXPIRED = "expired"
