"""Unit tests for ClockPolicy."""

from datetime import datetime

import pytest

from board.config import HourWindow, PolicySettings
from board.domain.service import ClockPolicy
from board.domain.value import PolicyAction


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 14, hour, minute)


class TestUploadWindow:
    """Upload window defaults to 14:00-19:00."""

    @pytest.mark.parametrize(
        "now,expected",
        [
            (at(13, 59), False),
            (at(14, 0), True),
            (at(16, 30), True),
            (at(18, 59), True),
            (at(19, 0), False),
            (at(0, 0), False),
        ],
    )
    def test_boundaries(self, now, expected):
        """Window is half-open: start inclusive, end exclusive."""
        policy = ClockPolicy(PolicySettings())

        assert policy.allowed(PolicyAction.UPLOAD_WINDOW, now) is expected


class TestMobileAccessWindow:
    """Mobile access window defaults to 10:00-13:00."""

    @pytest.mark.parametrize(
        "now,expected",
        [
            (at(9, 59), False),
            (at(10, 0), True),
            (at(12, 59), True),
            (at(13, 0), False),
        ],
    )
    def test_boundaries(self, now, expected):
        policy = ClockPolicy(PolicySettings())

        assert policy.allowed(PolicyAction.MOBILE_ACCESS_WINDOW, now) is expected


class TestConfiguredWindows:
    """Tests for non-default windows."""

    def test_equal_bounds_is_always_closed(self):
        """A window with start == end never allows the action."""
        settings = PolicySettings(upload_window=HourWindow(start_hour=9, end_hour=9))
        policy = ClockPolicy(settings)

        assert not any(
            policy.allowed(PolicyAction.UPLOAD_WINDOW, at(hour)) for hour in range(24)
        )

    def test_full_day_window_is_always_open(self):
        settings = PolicySettings(upload_window=HourWindow(start_hour=0, end_hour=24))
        policy = ClockPolicy(settings)

        assert all(
            policy.allowed(PolicyAction.UPLOAD_WINDOW, at(hour)) for hour in range(24)
        )

    def test_window_returns_configured_bounds(self):
        policy = ClockPolicy(PolicySettings())

        window = policy.window(PolicyAction.UPLOAD_WINDOW)

        assert (window.start_hour, window.end_hour) == (14, 19)
