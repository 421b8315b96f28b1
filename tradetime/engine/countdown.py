"""Countdown display strings with urgency flags."""

from tradetime.models import CountdownInfo
from tradetime.utils.constants import SOON_THRESHOLD_SECONDS, URGENT_THRESHOLD_SECONDS

_NOW = CountdownInfo(display="Now", is_urgent=True, is_soon=True)


def format_countdown_seconds(total_seconds: int) -> CountdownInfo:
    """Render a second count as ``"1h 5m"``, ``"14m 10s"`` or ``"42s"``.

    Urgent at 15 minutes or less, soon at one hour or less.
    """
    if total_seconds <= 0:
        return _NOW

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        display = f"{hours}h {minutes}m"
    elif minutes > 0:
        display = f"{minutes}m {seconds}s"
    else:
        display = f"{seconds}s"

    return CountdownInfo(
        display=display,
        is_urgent=total_seconds <= URGENT_THRESHOLD_SECONDS,
        is_soon=total_seconds <= SOON_THRESHOLD_SECONDS,
    )


def format_countdown_minutes(total_minutes: int) -> CountdownInfo:
    """Minute-resolution variant: ``"2h 15m"`` or ``"45m"``."""
    if total_minutes <= 0:
        return _NOW

    hours, minutes = divmod(total_minutes, 60)
    display = f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"

    return CountdownInfo(
        display=display,
        is_urgent=total_minutes * 60 <= URGENT_THRESHOLD_SECONDS,
        is_soon=total_minutes * 60 <= SOON_THRESHOLD_SECONDS,
    )
