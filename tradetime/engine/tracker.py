"""Active and upcoming window sets for live countdowns."""

from __future__ import annotations

from collections.abc import Sequence

from tradetime.engine.intervals import is_active, seconds_remaining
from tradetime.models import ActiveWindow, UpcomingWindow, Window, WindowKind
from tradetime.utils.constants import DEFAULT_UPCOMING_LIMIT


def active_windows(catalog: Sequence[Window], position: int) -> list[ActiveWindow]:
    """Every window containing *position*, in catalog order."""
    return [
        ActiveWindow(
            window=w,
            seconds_remaining=seconds_remaining(position, w.start_second, w.end_second),
        )
        for w in catalog
        if is_active(position, w.start_second, w.end_second)
    ]


def upcoming_windows(
    catalog: Sequence[Window],
    position: int,
    limit: int = DEFAULT_UPCOMING_LIMIT,
) -> list[UpcomingWindow]:
    """Windows starting later today that are not already active, soonest first."""
    upcoming = [
        UpcomingWindow(window=w, seconds_until_start=w.start_second - position)
        for w in catalog
        if w.start_second > position and not is_active(position, w.start_second, w.end_second)
    ]
    upcoming.sort(key=lambda u: u.seconds_until_start)
    return upcoming[:limit]


def countdown_seconds(active: Sequence[ActiveWindow], upcoming: Sequence[UpcomingWindow]) -> int:
    """Soonest end among active windows, else the nearest start, else 0."""
    if active:
        return min(a.seconds_remaining for a in active)
    if upcoming:
        return upcoming[0].seconds_until_start
    return 0


def next_window_of_kind(upcoming: Sequence[UpcomingWindow], kind: WindowKind) -> UpcomingWindow | None:
    return next((u for u in upcoming if u.window.kind is kind), None)


def next_significant_window(upcoming: Sequence[UpcomingWindow]) -> UpcomingWindow | None:
    return upcoming[0] if upcoming else None


class EventTracker:
    """Bundles the active/upcoming/countdown computations for one catalog."""

    def __init__(self, upcoming_limit: int = DEFAULT_UPCOMING_LIMIT) -> None:
        self._upcoming_limit = upcoming_limit

    def track(
        self, catalog: Sequence[Window], position: int
    ) -> tuple[list[ActiveWindow], list[UpcomingWindow], int]:
        active = active_windows(catalog, position)
        upcoming = upcoming_windows(catalog, position, self._upcoming_limit)
        return active, upcoming, countdown_seconds(active, upcoming)
