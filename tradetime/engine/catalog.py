"""Normalize killzones, macros, sessions and today's news into one window list."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from tradetime.engine.intervals import as_utc, second_of_day
from tradetime.models import (
    NewsInstance,
    NewsTemplate,
    TimeOfDay,
    TradingData,
    Window,
    WindowKind,
)

logger = logging.getLogger(__name__)


def _timed_window(kind: WindowKind, source_id: str, name: str, start: TimeOfDay, end: TimeOfDay) -> Window:
    return Window(
        kind=kind,
        name=name,
        start_second=start.total_seconds,
        end_second=end.total_seconds,
        source_id=source_id,
    )


def news_window(instance: NewsInstance, template: NewsTemplate) -> Window:
    """Expand a news instance into ``[scheduled - countdown, scheduled + cooldown)``."""
    scheduled = as_utc(instance.scheduled_time)
    start = scheduled - timedelta(minutes=template.countdown_minutes)
    end = scheduled + timedelta(minutes=template.cooldown_minutes)
    return Window(
        kind=WindowKind.NEWS,
        name=instance.name,
        start_second=second_of_day(start),
        end_second=second_of_day(end),
        source_id=instance.id,
        scheduled_time=scheduled,
    )


def todays_news_windows(
    instances: Iterable[NewsInstance],
    templates: Iterable[NewsTemplate],
    evaluation_date: date,
) -> list[Window]:
    """News windows for active instances scheduled on *evaluation_date* (UTC).

    Instances on other dates, disabled instances and instances referencing a
    missing template are dropped silently. A countdown or cooldown crossing
    midnight is not carried over to the neighbouring day.
    """
    by_id = {template.id: template for template in templates}
    windows: list[Window] = []
    for instance in instances:
        if not instance.is_active:
            continue
        if as_utc(instance.scheduled_time).date() != evaluation_date:
            continue
        template = by_id.get(instance.template_id)
        if template is None:
            logger.debug(
                "Dropping news instance %s: template %s not found",
                instance.id, instance.template_id,
            )
            continue
        windows.append(news_window(instance, template))
    return windows


def build_catalog(data: TradingData, now: datetime) -> list[Window]:
    """Build the sorted window catalog for the UTC calendar date of *now*.

    The sort is stable, so windows sharing a start keep source order
    (killzones, macros, sessions, news).
    """
    windows: list[Window] = []
    windows.extend(
        _timed_window(WindowKind.KILLZONE, kz.id, kz.name, kz.start, kz.end)
        for kz in data.killzones
    )
    windows.extend(
        _timed_window(WindowKind.MACRO, macro.id, macro.name, macro.start, macro.end)
        for macro in data.macros
    )
    windows.extend(
        _timed_window(WindowKind.SESSION, session.id, session.name, session.start, session.end)
        for session in data.market_sessions
    )
    evaluation_date = as_utc(now).date()
    windows.extend(
        todays_news_windows(data.news_instances, data.news_templates, evaluation_date)
    )
    windows.sort(key=lambda w: w.start_second)
    return windows
