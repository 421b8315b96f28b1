"""Shared test fixtures for TradeTime.

All instants are fixed and timezone-aware; nothing reads the wall clock.
"""

from datetime import datetime

import pytest

from tradetime.models import (
    KillzoneSession,
    MacroSession,
    MarketSession,
    NewsImpact,
    NewsInstance,
    NewsTemplate,
    SessionType,
    TimeOfDay,
    TradingData,
)
from tradetime.utils.constants import UTC

# A Tuesday well away from any DST transition in the zones under test
TEST_DATE = (2026, 6, 16)


@pytest.fixture
def at():
    """Factory for UTC instants on the test date: ``at(7, 15)`` -> 07:15:00Z."""

    def _at(hours: int, minutes: int, seconds: int = 0, day: int | None = None) -> datetime:
        year, month, default_day = TEST_DATE
        return datetime(year, month, day or default_day, hours, minutes, seconds, tzinfo=UTC)

    return _at


@pytest.fixture
def london_killzone():
    return KillzoneSession("london-kz", "London KZ", TimeOfDay(6, 0), TimeOfDay(9, 0), "London")


@pytest.fixture
def london_macro():
    return MacroSession("london-macro", "London Macro", TimeOfDay(7, 0), TimeOfDay(7, 30), "London")


@pytest.fixture
def nfp_template():
    return NewsTemplate("nfp", "Non-Farm Payrolls", countdown_minutes=5, cooldown_minutes=15,
                        impact=NewsImpact.HIGH)


@pytest.fixture
def news_at(at):
    """Factory for an NFP instance scheduled at the given UTC time on the test date."""

    def _news_at(hours: int, minutes: int, name: str = "NFP", day: int | None = None,
                 template_id: str = "nfp", is_active: bool = True) -> NewsInstance:
        return NewsInstance(
            id=f"{template_id}-{hours:02d}{minutes:02d}",
            template_id=template_id,
            name=name,
            scheduled_time=at(hours, minutes, day=day),
            is_active=is_active,
        )

    return _news_at


@pytest.fixture
def trading_data(london_killzone, london_macro, nfp_template):
    """Killzone 06:00-09:00 with macro 07:00-07:30, a lunch session and no news."""
    return TradingData(
        killzones=(london_killzone,),
        macros=(london_macro,),
        market_sessions=(
            MarketSession("lunch", "Lunch", TimeOfDay(12, 0), TimeOfDay(13, 0), SessionType.LUNCH),
        ),
        news_templates=(nfp_template,),
        news_instances=(),
        user_timezone="America/New_York",
    )
