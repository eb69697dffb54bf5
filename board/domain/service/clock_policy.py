"""Time-of-day action policies."""

from datetime import datetime

from board.config import HourWindow, PolicySettings
from board.domain.value import PolicyAction

from .base import Service


def hour_in_window(hour: int, window: HourWindow) -> bool:
    """Whether ``hour`` falls in the half-open interval [start, end).

    Equal bounds describe a window that is permanently closed.
    """
    return window.start_hour <= hour < window.end_hour


class ClockPolicy(Service):
    """Evaluates whether an action is allowed at a given wall-clock time.

    Pure: no I/O, no state beyond the configured windows. ``now`` is read
    in whatever timezone the caller passes; no normalization is performed.
    """

    def __init__(self, policy_settings: PolicySettings) -> None:
        """Initialize clock policy.

        Args:
            policy_settings: Configured action windows
        """
        self._windows = {
            PolicyAction.UPLOAD_WINDOW: policy_settings.upload_window,
            PolicyAction.MOBILE_ACCESS_WINDOW: policy_settings.mobile_access_window,
        }

    def window(self, action: PolicyAction) -> HourWindow:
        """Return the configured window for an action."""
        return self._windows[action]

    def allowed(self, action: PolicyAction, now: datetime) -> bool:
        """Check whether ``action`` is permitted at ``now``.

        Args:
            action: Policy-restricted action
            now: Caller's local time

        Returns:
            True if ``now.hour`` is inside the action's window
        """
        return hour_in_window(now.hour, self._windows[action])
