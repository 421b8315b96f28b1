"""Core data models for TradeTime.

All data models are Python dataclasses, serving as the contract between the
catalog builder, the status rules, the event tracker and the display layer.
Configuration records are frozen so that each evaluation receives an
immutable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

__all__ = [
    # Enums
    "TradingStatus",
    "WindowKind",
    "NewsImpact",
    "NewsPhase",
    "SessionType",
    # Configuration
    "TimeOfDay",
    "KillzoneSession",
    "MacroSession",
    "MarketSession",
    "NewsTemplate",
    "NewsInstance",
    "TradingData",
    # Engine
    "Window",
    "ActiveWindow",
    "UpcomingWindow",
    "StatusResult",
    "CountdownInfo",
    "ClockReading",
    "EngineOutput",
]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TradingStatus(Enum):
    """Traffic-light status shown to the trader."""

    GREEN = "green"
    AMBER = "amber"
    RED = "red"


class WindowKind(Enum):
    """Source a catalog window was derived from."""

    KILLZONE = "killzone"
    MACRO = "macro"
    SESSION = "session"
    NEWS = "news"


class NewsImpact(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NewsPhase(Enum):
    """Where 'now' sits relative to a news instance's scheduled time."""

    COUNTDOWN = "countdown"   # before the release
    HAPPENING = "happening"   # within the grace period after the release
    COOLDOWN = "cooldown"     # after the grace period, until cooldown ends


class SessionType(Enum):
    PREMARKET = "premarket"
    MARKET_OPEN = "market-open"
    LUNCH = "lunch"
    AFTER_HOURS = "after-hours"
    CUSTOM = "custom"


# ---------------------------------------------------------------------------
# Configuration (all times in UTC)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeOfDay:
    """Hours and minutes in a specific reference frame (UTC unless stated)."""

    hours: int
    minutes: int

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def total_seconds(self) -> int:
        return self.total_minutes * 60

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


@dataclass(frozen=True)
class KillzoneSession:
    """High-volatility window; trading is disallowed outside all killzones."""

    id: str
    name: str
    start: TimeOfDay
    end: TimeOfDay
    region: str = ""


@dataclass(frozen=True)
class MacroSession:
    """Narrow high-probability window that upgrades a killzone to green."""

    id: str
    name: str
    start: TimeOfDay
    end: TimeOfDay
    region: str = ""
    description: str = ""


@dataclass(frozen=True)
class MarketSession:
    """Generic labelled window used for display only."""

    id: str
    name: str
    start: TimeOfDay
    end: TimeOfDay
    session_type: SessionType = SessionType.CUSTOM
    description: str = ""


@dataclass(frozen=True)
class NewsTemplate:
    """Reusable shape for a news type."""

    id: str
    name: str
    countdown_minutes: int
    cooldown_minutes: int
    impact: NewsImpact = NewsImpact.HIGH
    description: str = ""


@dataclass(frozen=True)
class NewsInstance:
    """A scheduled occurrence of a news template.

    ``scheduled_time`` is an absolute, timezone-aware instant.
    """

    id: str
    template_id: str
    name: str
    scheduled_time: datetime
    impact: NewsImpact = NewsImpact.HIGH
    is_active: bool = True
    description: str = ""


@dataclass(frozen=True)
class TradingData:
    """Complete configuration snapshot for one evaluation."""

    killzones: tuple[KillzoneSession, ...] = ()
    macros: tuple[MacroSession, ...] = ()
    market_sessions: tuple[MarketSession, ...] = ()
    news_templates: tuple[NewsTemplate, ...] = ()
    news_instances: tuple[NewsInstance, ...] = ()
    user_timezone: str = "UTC"


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Window:
    """A normalized window in UTC seconds-of-day.

    Overnight iff ``end_second < start_second``. News windows also carry the
    absolute scheduled instant so the news rule can report its phase.
    """

    kind: WindowKind
    name: str
    start_second: int
    end_second: int
    source_id: str = ""
    scheduled_time: datetime | None = None

    @property
    def is_overnight(self) -> bool:
        return self.end_second < self.start_second


@dataclass(frozen=True)
class ActiveWindow:
    """Window currently containing 'now'."""

    window: Window
    seconds_remaining: int


@dataclass(frozen=True)
class UpcomingWindow:
    """Window starting strictly after 'now'."""

    window: Window
    seconds_until_start: int


@dataclass(frozen=True)
class StatusResult:
    status: TradingStatus
    period: str
    next_event: str = ""
    rule: str = ""


@dataclass(frozen=True)
class CountdownInfo:
    display: str
    is_urgent: bool
    is_soon: bool


@dataclass(frozen=True)
class ClockReading:
    """A formatted wall-clock reading for one timezone."""

    timezone: str
    time: str
    date: str


@dataclass
class EngineOutput:
    """Everything the display layer needs for one tick."""

    evaluated_at: datetime
    status: TradingStatus
    period: str
    next_event: str
    active_windows: list[ActiveWindow] = field(default_factory=list)
    upcoming_windows: list[UpcomingWindow] = field(default_factory=list)
    countdown_seconds: int = 0
    countdown: CountdownInfo | None = None
    clocks: dict[str, ClockReading] = field(default_factory=dict)
