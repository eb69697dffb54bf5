"""Unit tests for VerificationGate."""

from datetime import datetime, timedelta

import pytest

from board.config import VerificationSettings
from board.domain.error import VerificationRequiredError, VerificationStateError
from board.domain.service import VerificationGate
from board.domain.service.verification_gate import generate_numeric_code
from board.domain.value import VerificationResult, VerificationState


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 14, 15, 0))


@pytest.fixture
def gate(clock):
    return VerificationGate(
        expiry=timedelta(minutes=5),
        code_factory=lambda length: "123456",
        clock=clock,
    )


class TestIssue:
    """Tests for issue."""

    def test_new_gate_is_idle(self, gate):
        assert gate.state is VerificationState.IDLE
        assert gate.challenge is None
        assert not gate.can_consume

    def test_issue_moves_to_issued(self, gate, clock):
        code = gate.issue()

        assert code == "123456"
        assert gate.state is VerificationState.ISSUED
        assert gate.challenge.issued_at == clock.now
        assert gate.challenge.consumed is False

    def test_reissue_replaces_code(self, clock):
        codes = iter(["111111", "222222"])
        gate = VerificationGate(
            expiry=timedelta(minutes=5), code_factory=lambda n: next(codes), clock=clock
        )

        gate.issue()
        gate.issue()

        assert gate.verify("111111") is VerificationResult.MISMATCH
        assert gate.verify("222222") is VerificationResult.VERIFIED

    def test_issue_after_verified_is_rejected(self, gate):
        gate.issue()
        gate.verify("123456")

        with pytest.raises(VerificationStateError):
            gate.issue()

    def test_issue_after_expiry_starts_over(self, gate, clock):
        gate.issue()
        clock.advance(minutes=6)
        assert gate.verify("123456") is VerificationResult.EXPIRED

        gate.issue()

        assert gate.state is VerificationState.ISSUED
        assert gate.verify("123456") is VerificationResult.VERIFIED


class TestVerify:
    """Tests for verify."""

    def test_matching_code_verifies(self, gate):
        gate.issue()

        assert gate.verify("123456") is VerificationResult.VERIFIED
        assert gate.state is VerificationState.VERIFIED
        assert gate.can_consume

    def test_second_verify_after_success_is_rejected(self, gate):
        gate.issue()
        gate.verify("123456")

        with pytest.raises(VerificationStateError):
            gate.verify("123456")

    def test_wrong_code_keeps_gate_issued(self, gate):
        """A mismatch can be retried before expiry."""
        gate.issue()

        assert gate.verify("000000") is VerificationResult.MISMATCH
        assert gate.state is VerificationState.ISSUED
        assert gate.verify("123456") is VerificationResult.VERIFIED

    def test_code_just_before_expiry_verifies(self, gate, clock):
        gate.issue()
        clock.advance(minutes=4, seconds=59)

        assert gate.verify("123456") is VerificationResult.VERIFIED

    def test_code_at_expiry_is_expired(self, gate, clock):
        gate.issue()
        clock.advance(minutes=5)

        assert gate.verify("123456") is VerificationResult.EXPIRED
        assert gate.state is VerificationState.EXPIRED

    def test_expired_gate_rejects_further_verification(self, gate, clock):
        gate.issue()
        clock.advance(minutes=10)
        gate.verify("123456")

        with pytest.raises(VerificationStateError):
            gate.verify("123456")

    def test_verify_before_issue_is_rejected(self, gate):
        with pytest.raises(VerificationStateError):
            gate.verify("123456")

    def test_comparison_is_exact(self, gate):
        gate.issue()

        assert gate.verify("12345") is VerificationResult.MISMATCH
        assert gate.verify("1234567") is VerificationResult.MISMATCH
        assert gate.verify(" 123456") is VerificationResult.MISMATCH


class TestConsume:
    """Tests for consume."""

    def test_consume_spends_verification_once(self, gate):
        gate.issue()
        gate.verify("123456")

        gate.consume()

        assert gate.challenge.consumed is True
        assert not gate.can_consume
        with pytest.raises(VerificationRequiredError):
            gate.consume()

    def test_consume_without_verification_is_rejected(self, gate):
        gate.issue()

        with pytest.raises(VerificationRequiredError):
            gate.consume()

    def test_consume_before_issue_is_rejected(self, gate):
        with pytest.raises(VerificationRequiredError):
            gate.consume()
        assert not gate.spent

    def test_spent_after_consume(self, gate):
        gate.issue()
        gate.verify("123456")
        assert not gate.spent

        gate.consume()

        assert gate.spent

    def test_expires_at_follows_issue_time(self, gate, clock):
        assert gate.expires_at is None

        gate.issue()

        assert gate.expires_at == clock.now + timedelta(minutes=5)

    def test_gates_are_independent(self, clock):
        """Verifying one flow does not unlock another."""
        first = VerificationGate(
            expiry=timedelta(minutes=5), code_factory=lambda n: "123456", clock=clock
        )
        second = VerificationGate(
            expiry=timedelta(minutes=5), code_factory=lambda n: "123456", clock=clock
        )
        first.issue()
        second.issue()

        first.verify("123456")

        assert first.can_consume
        assert not second.can_consume


class TestCodeGeneration:
    """Tests for the default code generator."""

    def test_numeric_code_has_requested_length(self):
        code = generate_numeric_code(6)

        assert len(code) == 6
        assert code.isdigit()

    def test_from_settings_uses_configured_length(self):
        gate = VerificationGate.from_settings(
            VerificationSettings(code_length=8, expiry_seconds=60)
        )

        code = gate.issue()

        assert len(code) == 8
        assert gate.expiry == timedelta(seconds=60)
