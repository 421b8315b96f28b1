"""Default trading data shipped with the application (all times UTC)."""

from tradetime.models import (
    KillzoneSession,
    MacroSession,
    MarketSession,
    NewsImpact,
    NewsTemplate,
    SessionType,
    TimeOfDay,
    TradingData,
)

DEFAULT_KILLZONES = (
    KillzoneSession("london-kz", "London KZ", TimeOfDay(6, 0), TimeOfDay(9, 0), "London"),
    KillzoneSession("newyork-kz", "New York KZ", TimeOfDay(14, 30), TimeOfDay(17, 30), "New York"),
)

DEFAULT_MACROS = (
    MacroSession("london-1", "London Session 1", TimeOfDay(9, 33), TimeOfDay(10, 0), "London"),
    MacroSession("london-2", "London Session 2", TimeOfDay(11, 3), TimeOfDay(11, 30), "London"),
    MacroSession("ny-am-1", "NY AM 1", TimeOfDay(15, 50), TimeOfDay(16, 10), "New York"),
    MacroSession("ny-am-2", "NY AM 2", TimeOfDay(16, 50), TimeOfDay(17, 10), "New York"),
    MacroSession("ny-am-3", "NY AM 3", TimeOfDay(17, 50), TimeOfDay(18, 10), "New York"),
    MacroSession("ny-midday", "NY Midday", TimeOfDay(18, 50), TimeOfDay(19, 10), "New York"),
    MacroSession("ny-pm", "NY PM", TimeOfDay(20, 10), TimeOfDay(20, 40), "New York"),
    MacroSession("ny-closing", "NY Closing", TimeOfDay(22, 15), TimeOfDay(22, 45), "New York"),
)

DEFAULT_MARKET_SESSIONS = (
    MarketSession("premarket", "Pre-Market", TimeOfDay(7, 0), TimeOfDay(9, 30), SessionType.PREMARKET),
    MarketSession("lunch", "Lunch", TimeOfDay(18, 0), TimeOfDay(19, 0), SessionType.LUNCH),
)

DEFAULT_NEWS_TEMPLATES = (
    NewsTemplate("nfp", "Non-Farm Payrolls", 5, 15, NewsImpact.HIGH,
                 "Monthly employment report showing job creation in the US"),
    NewsTemplate("fomc", "FOMC Rate Decision", 5, 15, NewsImpact.HIGH,
                 "Federal Reserve interest rate announcement"),
    NewsTemplate("cpi", "Consumer Price Index", 5, 15, NewsImpact.HIGH,
                 "Inflation measure showing price changes"),
    NewsTemplate("gdp", "GDP Report", 5, 15, NewsImpact.MEDIUM,
                 "Quarterly economic growth report"),
    NewsTemplate("retail_sales", "Retail Sales", 5, 15, NewsImpact.MEDIUM,
                 "Monthly consumer spending report"),
    NewsTemplate("ecb_rate", "ECB Rate Decision", 5, 15, NewsImpact.HIGH,
                 "European Central Bank interest rate decision"),
)


def default_trading_data(user_timezone: str = "UTC") -> TradingData:
    return TradingData(
        killzones=DEFAULT_KILLZONES,
        macros=DEFAULT_MACROS,
        market_sessions=DEFAULT_MARKET_SESSIONS,
        news_templates=DEFAULT_NEWS_TEMPLATES,
        news_instances=(),
        user_timezone=user_timezone,
    )
