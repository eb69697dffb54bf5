"""Unit tests for UploadFlowRegistry."""

from datetime import datetime, timedelta

import pytest

from board.config import VerificationSettings
from board.domain.value import VerificationResult, VerificationState
from board.interface.api.upload_flows import UploadFlowRegistry


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
def flows(clock):
    return UploadFlowRegistry(
        VerificationSettings(expiry_seconds=300, abandon_after_seconds=1800),
        clock=clock,
    )


def verify(flows: UploadFlowRegistry, user_id: str) -> None:
    gate = flows.gate_for(user_id)
    code = gate.issue()
    assert gate.verify(code) is VerificationResult.VERIFIED


class TestGateFor:
    """Tests for gate_for."""

    def test_same_gate_while_flow_is_pending(self, flows):
        gate = flows.gate_for("ada")
        gate.issue()

        assert flows.gate_for("ada") is gate

    def test_spent_gate_is_replaced(self, flows):
        verify(flows, "ada")
        spent = flows.gate_for("ada")
        spent.consume()

        fresh = flows.gate_for("ada")

        assert fresh is not spent
        assert fresh.state is VerificationState.IDLE
        fresh.issue()

    def test_expired_gate_is_replaced(self, flows, clock):
        gate = flows.gate_for("ada")
        gate.issue()
        clock.advance(minutes=6)
        assert gate.verify("000000") is VerificationResult.EXPIRED

        assert flows.gate_for("ada") is not gate

    def test_own_issued_gate_past_expiry_reports_expiry(self, flows, clock):
        gate = flows.gate_for("ada")
        code = gate.issue()
        clock.advance(minutes=6)

        same = flows.gate_for("ada")

        assert same is gate
        assert same.verify(code) is VerificationResult.EXPIRED


class TestEviction:
    """Tests for eviction of finished flows."""

    def test_peek_evicts_spent_gate(self, flows):
        verify(flows, "ada")
        flows.gate_for("ada").consume()

        assert flows.peek("ada") is None
        assert len(flows) == 0

    def test_peek_evicts_issued_gate_past_expiry(self, flows, clock):
        flows.gate_for("ada").issue()
        clock.advance(minutes=5)

        assert flows.peek("ada") is None

    def test_abandoned_flows_of_other_users_are_evicted(self, flows, clock):
        flows.gate_for("ada").issue()
        verify(flows, "grace")
        clock.advance(minutes=31)

        flows.gate_for("alan")

        assert len(flows) == 1
        assert flows.peek("ada") is None
        assert flows.peek("grace") is None

    def test_verified_flow_survives_within_abandonment_window(self, flows, clock):
        verify(flows, "ada")
        clock.advance(minutes=29)

        gate = flows.peek("ada")

        assert gate is not None
        assert gate.can_consume
