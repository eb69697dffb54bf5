"""Domain layer errors.

Each error names one corrective action for the user, so callers can render
an exact message instead of a generic failure.
"""

from datetime import timedelta

from board.domain.value.types import LedgerRejection, PolicyAction


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PolicyDeniedError(DomainError):
    """Action attempted outside its allowed clock window. Fixed by waiting."""

    def __init__(self, action: PolicyAction, start_hour: int, end_hour: int):
        self.action = action
        self.start_hour = start_hour
        self.end_hour = end_hour
        super().__init__(
            f"{action.label} is only allowed between "
            f"{start_hour:02d}:00 and {end_hour:02d}:00"
        )


class VerificationRequiredError(DomainError):
    """Guarded action attempted without a fresh, unconsumed verification."""

    def __init__(self, message: str = "Please verify your email before uploading a video"):
        super().__init__(message)


class VerificationExpiredError(DomainError):
    """The one-time code expired; a new code must be issued."""

    def __init__(self) -> None:
        super().__init__("Verification code has expired, request a new one")


class VerificationMismatchError(DomainError):
    """The candidate code did not match; it may be retried before expiry."""

    def __init__(self) -> None:
        super().__init__("Verification code does not match")


class VerificationStateError(DomainError):
    """Gate operation called in a state that does not accept it."""

    pass


class RateLimitedError(DomainError):
    """Subject exhausted its allowance for the current period."""

    def __init__(self, retry_after: timedelta, message: str | None = None):
        self.retry_after = retry_after
        super().__init__(
            message
            or f"Rate limit reached, retry in {int(retry_after.total_seconds())} seconds"
        )


class LedgerRejectedError(DomainError):
    """Points transfer rejected for a specific reason."""

    def __init__(self, reason: LedgerRejection, message: str | None = None):
        self.reason = reason
        super().__init__(message or reason.message)


class StoreUnavailableError(DomainError):
    """The persistent store could not be reached.

    Transient and safe to retry. Never to be read as permission granted.
    """

    def __init__(self, operation: str, cause: str | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Store unavailable during {operation}{detail}")
