"""Per-user upload flows.

Each user gets one verification gate for their pending upload. Finished
flows are evicted on access: a gate that expired, was spent by an upload,
or was left verified past the abandonment window. The next upload then
starts from scratch.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from board.config import VerificationSettings
from board.domain.service import VerificationGate
from board.domain.value import VerificationState


@dataclass
class _Flow:
    gate: VerificationGate
    opened_at: datetime


class UploadFlowRegistry:
    """Process-local map of user ID to the gate of their upload flow."""

    def __init__(
        self,
        settings: VerificationSettings,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.settings = settings
        self.abandon_after = timedelta(seconds=settings.abandon_after_seconds)
        self._clock = clock or datetime.now
        self._flows: dict[str, _Flow] = {}

    def __len__(self) -> int:
        return len(self._flows)

    def gate_for(self, user_id: str) -> VerificationGate:
        """Return the user's gate, opening a new flow when none is pending.

        The user's own issued gate is kept even past its expiry so that
        verifying it reports the expiry instead of an unknown flow.
        """
        now = self._clock()
        self._evict_finished(now, keep=user_id)

        flow = self._flows.get(user_id)
        if flow is not None and flow.gate.state is not VerificationState.ISSUED:
            if self._finished(flow, now):
                flow = None
        if flow is None:
            flow = _Flow(
                gate=VerificationGate.from_settings(self.settings, clock=self._clock),
                opened_at=now,
            )
            self._flows[user_id] = flow
        return flow.gate

    def peek(self, user_id: str) -> VerificationGate | None:
        self._evict_finished(self._clock())
        flow = self._flows.get(user_id)
        return flow.gate if flow is not None else None

    def discard(self, user_id: str) -> None:
        """End the user's flow."""
        self._flows.pop(user_id, None)

    def _evict_finished(self, now: datetime, keep: str | None = None) -> None:
        finished = [
            user_id
            for user_id, flow in self._flows.items()
            if user_id != keep and self._finished(flow, now)
        ]
        for user_id in finished:
            del self._flows[user_id]

    def _finished(self, flow: _Flow, now: datetime) -> bool:
        gate = flow.gate
        if gate.state is VerificationState.EXPIRED or gate.spent:
            return True

        challenge = gate.challenge
        if challenge is None:
            return now - flow.opened_at >= gate.expiry
        if gate.state is VerificationState.VERIFIED:
            return now - challenge.issued_at >= self.abandon_after
        return now - challenge.issued_at >= gate.expiry
