"""Status rules: an ordered, first-match-wins chain over the window catalog.

Priority (highest first):

1. ``NewsRule``      -- any news blackout active            -> RED
2. ``KillzoneRule``  -- no killzone active                  -> RED
3. ``MacroRule``     -- killzone and macro both active      -> GREEN
4. ``DefaultRule``   -- killzone active without a macro     -> AMBER

Every rule is usable on its own; later rules re-derive what they need from
the catalog instead of relying on earlier rules having run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from tradetime.engine.intervals import as_utc, is_active, second_of_day
from tradetime.engine.news import news_phase
from tradetime.models import NewsPhase, StatusResult, TradingStatus, Window, WindowKind
from tradetime.utils.constants import SECONDS_PER_DAY

logger = logging.getLogger(__name__)

OUTSIDE_KILLZONE = "Outside Killzone - No Trading"
NO_UPCOMING_EVENTS = "No upcoming events"

_NEWS_PHASE_LABELS = {
    NewsPhase.COUNTDOWN: "News Countdown",
    NewsPhase.HAPPENING: "News Happening",
    NewsPhase.COOLDOWN: "News Cooldown",
}


@dataclass(frozen=True)
class StatusContext:
    """Immutable inputs shared by every rule for one evaluation."""

    now: datetime
    position: int
    catalog: tuple[Window, ...]

    @classmethod
    def build(cls, now: datetime, catalog: Sequence[Window]) -> StatusContext:
        return cls(now=now, position=second_of_day(now), catalog=tuple(catalog))

    def active_of_kind(self, kind: WindowKind) -> list[Window]:
        return [
            w for w in self.catalog
            if w.kind is kind and is_active(self.position, w.start_second, w.end_second)
        ]

    def first_active(self, kind: WindowKind) -> Window | None:
        active = self.active_of_kind(kind)
        return active[0] if active else None


class StatusRule(Protocol):
    """Interface for a single rule in the status chain."""

    @property
    def name(self) -> str: ...

    def evaluate(self, ctx: StatusContext) -> StatusResult | None: ...


class NewsRule:
    """A news blackout overrides everything; the earliest-scheduled release wins."""

    @property
    def name(self) -> str:
        return "news"

    def evaluate(self, ctx: StatusContext) -> StatusResult | None:
        active = [w for w in ctx.active_of_kind(WindowKind.NEWS) if w.scheduled_time is not None]
        if not active:
            return None
        window = min(active, key=lambda w: as_utc(w.scheduled_time))
        phase = news_phase(window.scheduled_time, ctx.now)
        return StatusResult(
            status=TradingStatus.RED,
            period=f"{window.name} - {_NEWS_PHASE_LABELS[phase]}",
            rule=self.name,
        )


class KillzoneRule:
    """Outside every killzone trading is not allowed."""

    @property
    def name(self) -> str:
        return "killzone"

    def evaluate(self, ctx: StatusContext) -> StatusResult | None:
        if ctx.first_active(WindowKind.KILLZONE) is not None:
            return None
        return StatusResult(status=TradingStatus.RED, period=OUTSIDE_KILLZONE, rule=self.name)


class MacroRule:
    """Killzone plus an active macro is the optimal window."""

    @property
    def name(self) -> str:
        return "macro"

    def evaluate(self, ctx: StatusContext) -> StatusResult | None:
        killzone = ctx.first_active(WindowKind.KILLZONE)
        macro = ctx.first_active(WindowKind.MACRO)
        if killzone is None or macro is None:
            return None
        return StatusResult(
            status=TradingStatus.GREEN,
            period=f"{killzone.name} + {macro.name} - Optimal Trading",
            rule=self.name,
        )


class DefaultRule:
    """Fallback: caution inside a killzone, otherwise no trading."""

    @property
    def name(self) -> str:
        return "default"

    def evaluate(self, ctx: StatusContext) -> StatusResult:
        killzone = ctx.first_active(WindowKind.KILLZONE)
        if killzone is None:
            return StatusResult(status=TradingStatus.RED, period=OUTSIDE_KILLZONE, rule=self.name)
        return StatusResult(
            status=TradingStatus.AMBER,
            period=f"{killzone.name} - Caution (No Macro)",
            rule=self.name,
        )


def default_rules() -> list[StatusRule]:
    return [NewsRule(), KillzoneRule(), MacroRule(), DefaultRule()]


def next_event_label(catalog: Sequence[Window], position: int) -> str:
    """Name the next window to start and how long until it does.

    When nothing else starts today, the first window of the catalog is
    reported with a full day added.
    """
    if not catalog:
        return NO_UPCOMING_EVENTS
    later = [w for w in catalog if w.start_second > position]
    if later:
        window = min(later, key=lambda w: w.start_second)
        until = window.start_second - position
    else:
        window = catalog[0]
        until = SECONDS_PER_DAY - position + window.start_second
    hours, minutes = divmod(until // 60, 60)
    if hours > 0:
        return f"{window.name} in {hours}h {minutes}m"
    return f"{window.name} in {minutes}m"


class StatusEvaluator:
    """Runs the rule chain and attaches the next-event label."""

    def __init__(self, rules: list[StatusRule] | None = None) -> None:
        self._rules = rules if rules is not None else default_rules()

    @property
    def rules(self) -> list[StatusRule]:
        return list(self._rules)

    def evaluate(self, now: datetime, catalog: Sequence[Window]) -> StatusResult:
        ctx = StatusContext.build(now, catalog)
        next_event = next_event_label(ctx.catalog, ctx.position)
        for rule in self._rules:
            result = rule.evaluate(ctx)
            if result is not None:
                logger.debug("Rule %s matched: %s", rule.name, result.period)
                return StatusResult(
                    status=result.status,
                    period=result.period,
                    next_event=next_event,
                    rule=result.rule,
                )
        return StatusResult(
            status=TradingStatus.RED,
            period=OUTSIDE_KILLZONE,
            next_event=next_event,
            rule="none",
        )
