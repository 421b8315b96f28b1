"""UTC <-> local time-of-day conversion and display formatting.

Offsets are taken at the *current* calendar date, so daylight saving is
respected for today but not retroactively for other dates. Conversions are
best-effort: callers that must keep working with a broken timezone setting use
the ``*_or_passthrough`` helpers, which log a warning and return the value
unconverted.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tradetime.models import TimeOfDay
from tradetime.utils.constants import MINUTES_PER_DAY, SHOW_SECONDS_BELOW_MINUTES, UTC

logger = logging.getLogger(__name__)

# Short display names for common zones; anything else falls back to the city.
_TIMEZONE_ABBREVIATIONS: dict[str, str] = {
    "UTC": "UTC",
    "America/New_York": "EST",
    "America/Toronto": "EST",
    "America/Chicago": "CST",
    "America/Denver": "MST",
    "America/Phoenix": "MST",
    "America/Los_Angeles": "PST",
    "America/Anchorage": "AKST",
    "Pacific/Honolulu": "HST",
    "Europe/London": "GMT",
    "Europe/Dublin": "GMT",
    "Europe/Paris": "CET",
    "Europe/Berlin": "CET",
    "Europe/Madrid": "CET",
    "Europe/Zurich": "CET",
    "Europe/Athens": "EET",
    "Europe/Helsinki": "EET",
    "Europe/Moscow": "MSK",
    "Asia/Tokyo": "JST",
    "Asia/Seoul": "KST",
    "Asia/Shanghai": "CST-CN",
    "Asia/Hong_Kong": "HKT",
    "Asia/Singapore": "SGT",
    "Asia/Kolkata": "IST-IN",
    "Asia/Dubai": "GST-AE",
    "Asia/Beirut": "EET",
    "Asia/Jerusalem": "IST-IL",
    "Australia/Sydney": "AEST",
    "Australia/Perth": "AWST",
    "Africa/Johannesburg": "SAST",
    "America/Sao_Paulo": "BRT",
    "Pacific/Auckland": "NZST",
}


class TimezoneError(ValueError):
    """Raised when a timezone identifier cannot be resolved."""

    def __init__(self, tz: str) -> None:
        super().__init__(f"Unknown timezone: {tz!r}")
        self.tz = tz


def get_zone(tz: str) -> ZoneInfo:
    """Resolve an IANA timezone id, raising ``TimezoneError`` if unknown."""
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
        # OSError covers ids naming a tzdata directory such as "America"
        raise TimezoneError(tz) from exc


def _today_utc() -> date:
    return datetime.now(UTC).date()


def _wrap(total_minutes: int) -> TimeOfDay:
    total_minutes %= MINUTES_PER_DAY
    return TimeOfDay(hours=total_minutes // 60, minutes=total_minutes % 60)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def convert_utc_to_local(
    hours: int, minutes: int, tz: str, today: date | None = None
) -> TimeOfDay:
    """Convert a UTC time-of-day into *tz* using today's offset.

    Raises:
        TimezoneError: If *tz* is not a recognized timezone id.
    """
    if tz == "UTC":
        return TimeOfDay(hours, minutes)
    zone = get_zone(tz)
    day = today or _today_utc()
    instant = datetime(day.year, day.month, day.day, tzinfo=UTC) + timedelta(
        hours=hours, minutes=minutes
    )
    local = instant.astimezone(zone)
    return TimeOfDay(local.hour, local.minute)


def convert_local_to_utc(
    hours: int, minutes: int, tz: str, today: date | None = None
) -> TimeOfDay:
    """Convert a time-of-day in *tz* to UTC using today's offset.

    Inside a DST gap or overlap the offset of the earlier fold is used, so the
    round trip with ``convert_utc_to_local`` is exact except at a transition.

    Raises:
        TimezoneError: If *tz* is not a recognized timezone id.
    """
    if tz == "UTC":
        return TimeOfDay(hours, minutes)
    zone = get_zone(tz)
    day = today or _today_utc()
    local = datetime(day.year, day.month, day.day, tzinfo=zone) + timedelta(
        hours=hours, minutes=minutes
    )
    offset = local.utcoffset() or timedelta(0)
    offset_minutes = int(offset.total_seconds() // 60)
    return _wrap(hours * 60 + minutes - offset_minutes)


def to_local_or_passthrough(
    hours: int, minutes: int, tz: str, today: date | None = None
) -> TimeOfDay:
    """Best-effort ``convert_utc_to_local``: unknown zones pass through unconverted."""
    try:
        return convert_utc_to_local(hours, minutes, tz, today)
    except TimezoneError:
        logger.warning("Cannot convert %02d:%02d to %r; showing UTC value", hours, minutes, tz)
        return TimeOfDay(hours, minutes)


def to_utc_or_passthrough(
    hours: int, minutes: int, tz: str, today: date | None = None
) -> TimeOfDay:
    """Best-effort ``convert_local_to_utc``: unknown zones pass through unconverted."""
    try:
        return convert_local_to_utc(hours, minutes, tz, today)
    except TimezoneError:
        logger.warning("Cannot convert %02d:%02d from %r; keeping value as UTC", hours, minutes, tz)
        return TimeOfDay(hours, minutes)


def time_in_timezone(now: datetime, tz: str) -> datetime:
    """Return *now* expressed in *tz*, falling back to UTC for unknown zones."""
    try:
        zone = get_zone(tz)
    except TimezoneError:
        logger.warning("Unknown timezone %r; falling back to UTC clock", tz)
        zone = UTC
    return now.astimezone(zone)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_time(
    hours: int, minutes: int, seconds: int | None = None, show_seconds: bool = False
) -> str:
    if show_seconds and seconds is not None:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{hours:02d}:{minutes:02d}"


def should_show_seconds(show_seconds: bool, countdown_minutes: int | None) -> bool:
    """Seconds are shown when the user asks for them OR a countdown is under 5 minutes."""
    is_countdown_low = (
        countdown_minutes is not None and countdown_minutes < SHOW_SECONDS_BELOW_MINUTES
    )
    return show_seconds or is_countdown_low


def format_time_smart(
    hours: int,
    minutes: int,
    seconds: int | None = None,
    show_seconds: bool = False,
    countdown_minutes: int | None = None,
) -> str:
    """Render ``HH:MM`` or ``HH:MM:SS``.

    The precision escalates automatically as a tracked event approaches: with
    less than five countdown minutes left, seconds are shown even when the
    user's preference is off.
    """
    if should_show_seconds(show_seconds, countdown_minutes) and seconds is not None:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{hours:02d}:{minutes:02d}"


def format_countdown_smart(
    hours: int,
    minutes: int,
    seconds: int | None = None,
    show_seconds: bool = False,
    countdown_minutes: int | None = None,
) -> str:
    """Render ``HHh MMm`` or ``HHh MMm SSs`` using the same escalation rule."""
    if should_show_seconds(show_seconds, countdown_minutes) and seconds is not None:
        return f"{hours:02d}h {minutes:02d}m {seconds:02d}s"
    return f"{hours:02d}h {minutes:02d}m"


def calculate_duration_minutes(start: TimeOfDay, end: TimeOfDay) -> int:
    """Duration from *start* to *end*, treating ``end < start`` as overnight."""
    return (end.total_minutes - start.total_minutes) % MINUTES_PER_DAY


def format_duration(start: TimeOfDay, end: TimeOfDay) -> str:
    duration = calculate_duration_minutes(start, end)
    hours, minutes = divmod(duration, 60)
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"


def timezone_offset_label(tz: str, now: datetime | None = None) -> str:
    """Return the current offset of *tz* as ``UTC+HH:MM``; unknown zones give ``UTC+00:00``."""
    try:
        zone = get_zone(tz)
    except TimezoneError:
        logger.warning("Cannot compute offset for unknown timezone %r", tz)
        return "UTC+00:00"
    moment = (now or datetime.now(UTC)).astimezone(zone)
    offset_minutes = int((moment.utcoffset() or timedelta(0)).total_seconds() // 60)
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def timezone_abbreviation(tz: str) -> str:
    if tz in _TIMEZONE_ABBREVIATIONS:
        return _TIMEZONE_ABBREVIATIONS[tz]
    return tz.split("/")[-1].replace("_", " ")


def format_display_date(moment: datetime) -> str:
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_date_for_display(tz: str, now: datetime | None = None) -> str:
    """Format the calendar date in *tz* as e.g. ``Oct 19, 2026``."""
    return format_display_date(time_in_timezone(now or datetime.now(UTC), tz))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def is_valid_time(hours: int, minutes: int) -> bool:
    return 0 <= hours <= 23 and 0 <= minutes <= 59


def normalize_time(hours: int, minutes: int) -> TimeOfDay:
    """Fold minute and hour overflow (in either direction) into a valid time."""
    return _wrap(hours * 60 + minutes)
