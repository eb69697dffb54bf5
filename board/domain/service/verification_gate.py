"""One-time code gate for a single sensitive action.

A gate is created per flow (one upload attempt), passed explicitly through
that flow, and discarded afterwards. It is never shared between requests.

    IDLE --issue--> ISSUED --verify(match)--> VERIFIED --consume--> (spent)
                      |  ^
          verify(miss)|  |issue (replaces code)
                      v  |
                    ISSUED          ISSUED --verify(after expiry)--> EXPIRED
"""

import hmac
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

import logfire

from board.config import VerificationSettings
from board.domain.error import VerificationRequiredError, VerificationStateError
from board.domain.value import VerificationResult, VerificationState


def generate_numeric_code(length: int) -> str:
    """Generate a random numeric code using a CSPRNG."""
    return "".join(secrets.choice("0123456789") for _ in range(length))


@dataclass
class VerificationChallenge:
    """Ephemeral challenge state. Never persisted."""

    code: str
    issued_at: datetime
    consumed: bool = False


class VerificationGate:
    """Challenge/response state machine guarding one action.

    Not thread-safe and not meant to be: one flow owns one gate.
    """

    def __init__(
        self,
        expiry: timedelta,
        code_length: int = 6,
        code_factory: Callable[[int], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize an idle gate.

        Args:
            expiry: How long an issued code stays valid
            code_length: Number of digits per code
            code_factory: Code generator, defaults to a CSPRNG numeric code
            clock: Time source, defaults to ``datetime.now``
        """
        self.expiry = expiry
        self.code_length = code_length
        self._code_factory = code_factory or generate_numeric_code
        self._clock = clock or datetime.now
        self._challenge: VerificationChallenge | None = None
        self._state = VerificationState.IDLE

    @classmethod
    def from_settings(
        cls, settings: VerificationSettings, **kwargs
    ) -> "VerificationGate":
        """Create a gate using configured expiry and code length."""
        return cls(
            expiry=timedelta(seconds=settings.expiry_seconds),
            code_length=settings.code_length,
            **kwargs,
        )

    @property
    def state(self) -> VerificationState:
        return self._state

    @property
    def challenge(self) -> VerificationChallenge | None:
        return self._challenge

    @property
    def expires_at(self) -> datetime | None:
        if self._challenge is None:
            return None
        return self._challenge.issued_at + self.expiry

    @property
    def spent(self) -> bool:
        """True once the verification has been consumed by an upload."""
        return self._challenge is not None and self._challenge.consumed

    def issue(self) -> str:
        """Generate a new code, replacing any outstanding one.

        Returns:
            The code to deliver to the user

        Raises:
            VerificationStateError: If the gate is already verified
        """
        if self._state is VerificationState.VERIFIED:
            raise VerificationStateError("Gate already verified; start a new flow")

        code = self._code_factory(self.code_length)
        self._challenge = VerificationChallenge(code=code, issued_at=self._clock())
        self._state = VerificationState.ISSUED
        logfire.debug("Verification code issued")
        return code

    def verify(self, candidate: str) -> VerificationResult:
        """Check a candidate code against the outstanding challenge.

        A mismatch leaves the code and state untouched so the user can
        retry within the expiry window. Only expiry forces a re-issue.

        Args:
            candidate: Code entered by the user

        Returns:
            VERIFIED, MISMATCH, or EXPIRED

        Raises:
            VerificationStateError: If no code is outstanding
        """
        if self._state is not VerificationState.ISSUED or self._challenge is None:
            raise VerificationStateError(
                f"Cannot verify a gate in state {self._state.value}"
            )

        elapsed = self._clock() - self._challenge.issued_at
        if elapsed >= self.expiry:
            self._state = VerificationState.EXPIRED
            logfire.info("Verification code expired", elapsed_s=elapsed.total_seconds())
            return VerificationResult.EXPIRED

        if not hmac.compare_digest(
            candidate.encode("utf-8"), self._challenge.code.encode("utf-8")
        ):
            logfire.info("Verification code mismatch")
            return VerificationResult.MISMATCH

        self._state = VerificationState.VERIFIED
        logfire.info("Verification succeeded")
        return VerificationResult.VERIFIED

    @property
    def can_consume(self) -> bool:
        return (
            self._state is VerificationState.VERIFIED
            and self._challenge is not None
            and not self._challenge.consumed
        )

    def consume(self) -> None:
        """Spend the verification on the guarded action.

        Raises:
            VerificationRequiredError: If not verified or already spent
        """
        challenge = self._challenge
        if challenge is None or not self.can_consume:
            raise VerificationRequiredError()
        challenge.consumed = True
