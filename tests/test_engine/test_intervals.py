"""Tests for circular interval arithmetic."""

from datetime import datetime, timedelta, timezone

import pytest

from tradetime.engine.intervals import (
    as_utc,
    is_active,
    second_of_day,
    seconds_remaining,
    seconds_until_end,
    seconds_until_start,
    window_duration,
)
from tradetime.utils.constants import SECONDS_PER_DAY, UTC


def hm(hours: int, minutes: int = 0) -> int:
    return hours * 3600 + minutes * 60


class TestIsActive:
    def test_inside_normal_window(self):
        assert is_active(hm(7), hm(6), hm(9)) is True

    def test_start_is_inclusive(self):
        assert is_active(hm(6), hm(6), hm(9)) is True

    def test_end_is_exclusive(self):
        assert is_active(hm(9), hm(6), hm(9)) is False

    def test_before_normal_window(self):
        assert is_active(hm(5, 59), hm(6), hm(9)) is False

    @pytest.mark.parametrize(
        "position,expected",
        [
            (hm(23, 30), True),
            (hm(0, 30), True),
            (hm(12), False),
            (hm(23), True),
            (hm(1), False),
        ],
    )
    def test_overnight_window(self, position, expected):
        assert is_active(position, hm(23), hm(1)) is expected

    def test_zero_length_window_never_matches(self):
        for position in range(0, SECONDS_PER_DAY, 600):
            assert is_active(position, hm(10), hm(10)) is False

    @pytest.mark.parametrize("start,end", [(hm(6), hm(9)), (hm(22), hm(2)), (hm(0), hm(23, 59))])
    def test_active_arc_length_equals_duration(self, start, end):
        """Sampled per minute, the active arc covers exactly (end - start) mod 1 day."""
        active_minutes = sum(
            1 for position in range(0, SECONDS_PER_DAY, 60) if is_active(position, start, end)
        )
        assert active_minutes * 60 == window_duration(start, end)


class TestSecondsRemaining:
    def test_normal_window(self):
        assert seconds_remaining(hm(8), hm(6), hm(9)) == 3600

    def test_overnight_before_midnight(self):
        # 23:30 in [23:00, 01:00) -> 30 min to midnight + 1 h
        assert seconds_remaining(hm(23, 30), hm(23), hm(1)) == 5400

    def test_overnight_after_midnight(self):
        assert seconds_remaining(hm(0, 30), hm(23), hm(1)) == 1800


class TestSecondsUntilStart:
    def test_later_today(self):
        assert seconds_until_start(hm(6), hm(7)) == 3600

    def test_wraps_to_tomorrow(self):
        assert seconds_until_start(hm(23), hm(1)) == 2 * 3600


class TestSecondsUntilEnd:
    def test_agrees_with_remaining_inside_window(self):
        assert seconds_until_end(hm(23, 30), hm(1)) == seconds_remaining(hm(23, 30), hm(23), hm(1))

    def test_wraps_to_tomorrow(self):
        assert seconds_until_end(hm(2), hm(1)) == 23 * 3600


class TestWindowDuration:
    def test_normal(self):
        assert window_duration(hm(6), hm(9)) == 3 * 3600

    def test_overnight(self):
        assert window_duration(hm(23), hm(1)) == 2 * 3600


class TestSecondOfDay:
    def test_aware_utc(self):
        assert second_of_day(datetime(2026, 6, 16, 7, 15, 30, tzinfo=UTC)) == hm(7, 15) + 30

    def test_other_offset_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        assert second_of_day(datetime(2026, 6, 16, 9, 0, tzinfo=plus_two)) == hm(7)

    def test_naive_is_treated_as_utc(self):
        assert second_of_day(datetime(2026, 6, 16, 7, 0)) == hm(7)
        assert as_utc(datetime(2026, 6, 16, 7, 0)).tzinfo is UTC
