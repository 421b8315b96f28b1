"""One-shot evaluation: ``(now, config) -> EngineOutput``.

Pure apart from DEBUG/WARNING logging; holds no state between calls, so it is
safe to invoke concurrently as long as each call gets its own immutable
``TradingData`` snapshot.
"""

from __future__ import annotations

import logging
from datetime import datetime

from tradetime.engine.catalog import build_catalog
from tradetime.engine.countdown import format_countdown_seconds
from tradetime.engine.intervals import as_utc, second_of_day
from tradetime.engine.rules import StatusEvaluator
from tradetime.engine.tracker import EventTracker
from tradetime.models import ClockReading, EngineOutput, TradingData
from tradetime.utils.constants import DEFAULT_UPCOMING_LIMIT, TRADING_CENTERS
from tradetime.utils.time_conversion import (
    format_display_date,
    format_time_smart,
    time_in_timezone,
)

logger = logging.getLogger(__name__)

_DEFAULT_EVALUATOR = StatusEvaluator()


def format_clocks(
    now: datetime,
    user_timezone: str,
    show_seconds: bool,
    countdown_seconds: int,
) -> dict[str, ClockReading]:
    """UTC, user-local and trading-center clocks with smart seconds display."""
    countdown_minutes = countdown_seconds // 60
    zones = {"utc": "UTC", "local": user_timezone, **TRADING_CENTERS}
    clocks: dict[str, ClockReading] = {}
    for key, tz in zones.items():
        local = time_in_timezone(now, tz)
        clocks[key] = ClockReading(
            timezone=tz,
            time=format_time_smart(
                local.hour, local.minute, local.second, show_seconds, countdown_minutes,
            ),
            date=format_display_date(local),
        )
    return clocks


def recompute(
    now: datetime,
    data: TradingData,
    show_seconds: bool = False,
    upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
    evaluator: StatusEvaluator | None = None,
) -> EngineOutput:
    """Rebuild the catalog from scratch and evaluate everything for *now*."""
    now = as_utc(now)
    catalog = build_catalog(data, now)
    position = second_of_day(now)

    status = (evaluator or _DEFAULT_EVALUATOR).evaluate(now, catalog)
    active, upcoming, countdown = EventTracker(upcoming_limit).track(catalog, position)

    logger.debug(
        "Evaluated %d windows at %s: %s (%s), %d active, %d upcoming",
        len(catalog), now.isoformat(), status.status.value, status.period,
        len(active), len(upcoming),
    )

    return EngineOutput(
        evaluated_at=now,
        status=status.status,
        period=status.period,
        next_event=status.next_event,
        active_windows=active,
        upcoming_windows=upcoming,
        countdown_seconds=countdown,
        countdown=format_countdown_seconds(countdown),
        clocks=format_clocks(now, data.user_timezone, show_seconds, countdown),
    )
