"""Periodic status recomputation using APScheduler 3.x."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from tradetime.utils.constants import UTC

logger = logging.getLogger(__name__)

TICK_JOB_ID = "status_tick"


class StatusTicker:
    """Drives ``StatusMonitor.tick`` on a fixed interval.

    The 1 Hz cadence is a caller policy; the engine does not depend on it.
    """

    def __init__(self, monitor, interval_seconds: float = 1.0) -> None:
        self._monitor = monitor
        self._interval_seconds = interval_seconds
        self._scheduler = AsyncIOScheduler(timezone=UTC)

    def configure_jobs(self) -> None:
        """Register the tick job; once started, calling again replaces it."""
        self._scheduler.add_job(
            self._monitor.tick,
            IntervalTrigger(seconds=self._interval_seconds, timezone=UTC),
            id=TICK_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        logger.info("Registered job %s every %.1fs", TICK_JOB_ID, self._interval_seconds)

    def start(self) -> None:
        """Start the scheduler."""
        self._scheduler.start()
        logger.info("StatusTicker started")

    def shutdown(self) -> None:
        """Gracefully shutdown the scheduler."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        logger.info("StatusTicker shut down")

    @property
    def jobs(self):
        """Return the list of scheduled jobs (for testing)."""
        return self._scheduler.get_jobs()
