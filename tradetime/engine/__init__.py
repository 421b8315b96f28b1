"""Trading window status engine."""

from tradetime.engine.catalog import build_catalog
from tradetime.engine.countdown import format_countdown_minutes, format_countdown_seconds
from tradetime.engine.intervals import is_active
from tradetime.engine.recompute import recompute
from tradetime.engine.rules import (
    DefaultRule,
    KillzoneRule,
    MacroRule,
    NewsRule,
    StatusEvaluator,
    StatusRule,
)
from tradetime.engine.tracker import EventTracker

__all__ = [
    "DefaultRule",
    "EventTracker",
    "KillzoneRule",
    "MacroRule",
    "NewsRule",
    "StatusEvaluator",
    "StatusRule",
    "build_catalog",
    "format_countdown_minutes",
    "format_countdown_seconds",
    "is_active",
    "recompute",
]
