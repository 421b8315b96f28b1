"""TradeTime application entry point."""

import asyncio
import logging
import signal as signal_module

from tradetime.config import AppConfig
from tradetime.defaults import default_trading_data
from tradetime.events import EventBus, StatusChangedEvent
from tradetime.models import TradingData
from tradetime.monitor.status_monitor import StatusMonitor
from tradetime.scheduler.ticker import StatusTicker
from tradetime.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_monitor(config: AppConfig, event_bus: EventBus | None = None) -> StatusMonitor:
    """Wire the monitor from settings and the starting trading data."""
    if config.use_default_trading_data:
        data = default_trading_data(config.user_timezone)
    else:
        data = TradingData(user_timezone=config.user_timezone)
    return StatusMonitor(
        data,
        show_seconds=config.show_seconds,
        upcoming_limit=config.upcoming_limit,
        event_bus=event_bus,
    )


async def _log_status_change(event: StatusChangedEvent) -> None:
    logger.info(
        "Trading conditions %s: %s -> %s at %s (%s)",
        "improved" if event.is_upgrade else "worsened",
        event.previous.value, event.current.value, event.at.isoformat(), event.period,
    )


async def main() -> None:
    """Application entry point."""
    config = AppConfig()
    configure_logging(level=config.log_level, log_file=config.log_file or None)

    event_bus = EventBus()
    event_bus.subscribe(_log_status_change)
    monitor = create_monitor(config, event_bus)
    ticker = StatusTicker(monitor, interval_seconds=config.tick_interval_seconds)

    initial = monitor.snapshot()
    logger.info("Starting in %s: %s | next: %s", initial.status.value, initial.period, initial.next_event)

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal_module.SIGINT, signal_module.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    ticker.configure_jobs()
    ticker.start()
    try:
        await stop.wait()
    finally:
        ticker.shutdown()
        for sig in (signal_module.SIGINT, signal_module.SIGTERM):
            loop.remove_signal_handler(sig)


if __name__ == "__main__":
    asyncio.run(main())
