"""Password reset rate limiting."""

from datetime import datetime, timedelta

import logfire

from board.config import RateLimitSettings
from board.domain.error import NotFoundError
from board.domain.repository import UserRepository
from board.domain.value import UserId
from board.domain.value.outcome import RateLimitDecision
from board.util.locking import KeyedLock

from .base import Service


class RateLimitService(Service):
    """Fixed-window limiter over the per-user password reset counter.

    The counter and its period start live on the user row. A subject's
    read-check-write runs under an in-process key lock and a row lock, so
    concurrent requests for the same subject see each other's writes.
    Store failures propagate; a request is never allowed by default.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        locks: KeyedLock,
        settings: RateLimitSettings,
    ) -> None:
        """Initialize rate limit service.

        Args:
            user_repository: User repository
            locks: Shared per-subject lock map
            settings: Limit and period configuration
        """
        self.user_repository = user_repository
        self.locks = locks
        self.limit = settings.password_reset_limit
        self.period = timedelta(hours=settings.password_reset_period_hours)

    async def try_consume(self, subject_id: UserId, now: datetime) -> RateLimitDecision:
        """Consume one password reset from the subject's allowance.

        Args:
            subject_id: User requesting the reset
            now: Current time

        Returns:
            Allowed, or denied with the time until the period ends

        Raises:
            NotFoundError: If the subject does not exist
            StoreUnavailableError: If the store cannot be reached
        """
        with logfire.span("rate_limit_service.try_consume", subject_id=str(subject_id)):
            async with self.locks.hold(subject_id):
                user = await self.user_repository.find_by_id_for_update(subject_id)
                if not user:
                    logfire.warn("Rate limit subject not found", subject_id=str(subject_id))
                    raise NotFoundError("User", str(subject_id))

                count = user.password_reset_count
                period_start = user.password_reset_at
                if period_start is None or now - period_start >= self.period:
                    count = 0
                    period_start = now

                if count >= self.limit:
                    retry_after = period_start + self.period - now
                    logfire.info(
                        "Password reset denied",
                        subject_id=str(subject_id),
                        retry_after_s=retry_after.total_seconds(),
                    )
                    return RateLimitDecision.deny(retry_after)

                await self.user_repository.update_password_reset_state(
                    subject_id, count + 1, period_start
                )
                logfire.info(
                    "Password reset allowed", subject_id=str(subject_id), count=count + 1
                )
                return RateLimitDecision.allow()
