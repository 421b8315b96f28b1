"""Static timing constants for TradeTime.

User-tunable values (timezone, seconds display, upcoming limit, tick interval)
are configured via ``tradetime.config.AppConfig``. Only fixed engine constants
live here.
"""

from zoneinfo import ZoneInfo

# Timezone
UTC = ZoneInfo("UTC")

# Day arithmetic
SECONDS_PER_DAY = 24 * 60 * 60
MINUTES_PER_DAY = 24 * 60

# Countdown urgency thresholds (seconds)
URGENT_THRESHOLD_SECONDS = 900   # 15 minutes
SOON_THRESHOLD_SECONDS = 3600    # 1 hour

# Seconds are always shown once the countdown drops below this many minutes
SHOW_SECONDS_BELOW_MINUTES = 5

# A news instance is "happening" for this long after its scheduled time
NEWS_HAPPENING_GRACE_SECONDS = 60

DEFAULT_UPCOMING_LIMIT = 5

# Trading centers shown next to the UTC and user clocks
TRADING_CENTERS: dict[str, str] = {
    "new_york": "America/New_York",
    "london": "Europe/London",
    "tokyo": "Asia/Tokyo",
}
