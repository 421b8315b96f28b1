"""News template/instance queries over absolute instants."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime, timedelta

from tradetime.engine.intervals import as_utc
from tradetime.models import NewsInstance, NewsPhase, NewsTemplate
from tradetime.utils.constants import NEWS_HAPPENING_GRACE_SECONDS


def news_phase(scheduled_time: datetime, now: datetime) -> NewsPhase:
    """Classify *now* as before, at (within the grace period) or after a release."""
    delta = (as_utc(now) - as_utc(scheduled_time)).total_seconds()
    if delta < 0:
        return NewsPhase.COUNTDOWN
    if delta <= NEWS_HAPPENING_GRACE_SECONDS:
        return NewsPhase.HAPPENING
    return NewsPhase.COOLDOWN


def create_news_instance(
    template: NewsTemplate,
    scheduled_time: datetime,
    name: str | None = None,
    description: str | None = None,
) -> NewsInstance:
    """Schedule an active occurrence of *template*; impact always follows the template."""
    scheduled_time = as_utc(scheduled_time)
    return NewsInstance(
        id=f"{template.id}_{int(scheduled_time.timestamp())}",
        template_id=template.id,
        name=name or template.name,
        scheduled_time=scheduled_time,
        impact=template.impact,
        is_active=True,
        description=description or template.description,
    )


def _resolved(
    instances: Iterable[NewsInstance], templates: Iterable[NewsTemplate]
) -> list[tuple[NewsInstance, NewsTemplate]]:
    by_id = {template.id: template for template in templates}
    return [
        (instance, by_id[instance.template_id])
        for instance in instances
        if instance.is_active and instance.template_id in by_id
    ]


def active_news_instances(
    instances: Iterable[NewsInstance],
    templates: Iterable[NewsTemplate],
    now: datetime,
) -> list[tuple[NewsInstance, NewsTemplate, NewsPhase]]:
    """Instances whose countdown..cooldown span contains *now*, earliest first."""
    now = as_utc(now)
    active = []
    for instance, template in _resolved(instances, templates):
        scheduled = as_utc(instance.scheduled_time)
        countdown_start = scheduled - timedelta(minutes=template.countdown_minutes)
        cooldown_end = scheduled + timedelta(minutes=template.cooldown_minutes)
        if countdown_start <= now <= cooldown_end:
            active.append((instance, template, news_phase(scheduled, now)))
    active.sort(key=lambda item: as_utc(item[0].scheduled_time))
    return active


def upcoming_news_instances(
    instances: Iterable[NewsInstance],
    templates: Iterable[NewsTemplate],
    now: datetime,
    limit: int = 10,
) -> list[tuple[NewsInstance, NewsTemplate]]:
    """Instances whose countdown has not started yet, earliest first."""
    now = as_utc(now)
    upcoming = [
        (instance, template)
        for instance, template in _resolved(instances, templates)
        if now < as_utc(instance.scheduled_time) - timedelta(minutes=template.countdown_minutes)
    ]
    upcoming.sort(key=lambda item: as_utc(item[0].scheduled_time))
    return upcoming[:limit]


def seconds_until_release(instance: NewsInstance, now: datetime) -> int:
    return math.floor((as_utc(instance.scheduled_time) - as_utc(now)).total_seconds())


def seconds_until_cooldown_ends(
    instance: NewsInstance, template: NewsTemplate, now: datetime
) -> int:
    cooldown_end = as_utc(instance.scheduled_time) + timedelta(minutes=template.cooldown_minutes)
    return math.floor((cooldown_end - as_utc(now)).total_seconds())
