"""Tests for StatusTicker."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

from tradetime.scheduler.ticker import TICK_JOB_ID, StatusTicker


def _make_mock_monitor():
    monitor = MagicMock()
    monitor.tick = AsyncMock()
    return monitor


def test_tick_job_registered() -> None:
    ticker = StatusTicker(_make_mock_monitor())
    ticker.configure_jobs()

    assert [job.id for job in ticker.jobs] == [TICK_JOB_ID]


def test_default_interval_is_one_second() -> None:
    ticker = StatusTicker(_make_mock_monitor())
    ticker.configure_jobs()

    assert ticker.jobs[0].trigger.interval == timedelta(seconds=1)


def test_custom_interval() -> None:
    ticker = StatusTicker(_make_mock_monitor(), interval_seconds=0.5)
    ticker.configure_jobs()

    assert ticker.jobs[0].trigger.interval == timedelta(milliseconds=500)


async def test_reconfigure_after_start_replaces_job() -> None:
    ticker = StatusTicker(_make_mock_monitor())
    ticker.configure_jobs()
    ticker.start()
    try:
        ticker.configure_jobs()
        assert [job.id for job in ticker.jobs] == [TICK_JOB_ID]
    finally:
        ticker.shutdown()


def test_job_does_not_overlap() -> None:
    ticker = StatusTicker(_make_mock_monitor())
    ticker.configure_jobs()

    job = ticker.jobs[0]
    assert job.max_instances == 1
    assert job.coalesce is True


def test_job_calls_monitor_tick() -> None:
    monitor = _make_mock_monitor()
    ticker = StatusTicker(monitor)
    ticker.configure_jobs()

    assert ticker.jobs[0].func is monitor.tick


async def test_start_and_shutdown() -> None:
    ticker = StatusTicker(_make_mock_monitor())
    ticker.configure_jobs()
    ticker.start()
    assert ticker._scheduler.running is True

    ticker.shutdown()


def test_shutdown_before_start_is_safe() -> None:
    StatusTicker(_make_mock_monitor()).shutdown()
