"""Circular time-of-day arithmetic shared by every membership test.

All positions are seconds-of-day in UTC. A window ``[start, end)`` with
``end < start`` wraps past midnight. A zero-length window never matches.
"""

from datetime import datetime

from tradetime.utils.constants import SECONDS_PER_DAY, UTC


def as_utc(moment: datetime) -> datetime:
    """Express *moment* in UTC; naive datetimes are taken to already be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def second_of_day(moment: datetime) -> int:
    """Seconds since UTC midnight."""
    moment = as_utc(moment)
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def is_active(position: int, start: int, end: int) -> bool:
    """Circular interval test: is *position* inside ``[start, end)``?"""
    if start <= end:
        return start <= position < end
    return position >= start or position < end


def seconds_remaining(position: int, start: int, end: int) -> int:
    """Seconds until *end* for a window known to contain *position*."""
    if start > end and position >= start:
        return (SECONDS_PER_DAY - position) + end
    return end - position


def seconds_until_start(position: int, start: int) -> int:
    """Seconds until *start* next occurs, wrapping to tomorrow if already passed."""
    return (start - position) % SECONDS_PER_DAY


def seconds_until_end(position: int, end: int) -> int:
    return (end - position) % SECONDS_PER_DAY


def window_duration(start: int, end: int) -> int:
    return (end - start) % SECONDS_PER_DAY
