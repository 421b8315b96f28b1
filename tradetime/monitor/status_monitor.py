"""Holds the latest engine output and pushes it to subscribers.

The engine itself is stateless; this store only remembers the last snapshot
and the previous status so that transitions can be announced.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from tradetime.engine.recompute import recompute
from tradetime.events import StatusChangedEvent
from tradetime.models import EngineOutput, TradingData, TradingStatus
from tradetime.utils.constants import DEFAULT_UPCOMING_LIMIT, UTC
from tradetime.utils.log_context import log_context

if TYPE_CHECKING:
    from tradetime.events import EventBus

logger = logging.getLogger(__name__)

Subscriber = Callable[[EngineOutput], None]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class StatusMonitor:
    def __init__(
        self,
        data: TradingData,
        show_seconds: bool = False,
        upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
        clock: Callable[[], datetime] = _utc_now,
        event_bus: EventBus | None = None,
    ) -> None:
        self._data = data
        self._show_seconds = show_seconds
        self._upcoming_limit = upcoming_limit
        self._clock = clock
        self._event_bus = event_bus
        self._subscribers: list[Subscriber] = []
        self._snapshot: EngineOutput | None = None
        self._last_announced: TradingStatus | None = None
        self._tick_count = 0

    @property
    def data(self) -> TradingData:
        return self._data

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for every new snapshot; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def snapshot(self) -> EngineOutput:
        """Return the latest output, computing one on first use."""
        if self._snapshot is None:
            return self.refresh()
        return self._snapshot

    def refresh(self) -> EngineOutput:
        """Recompute now and notify subscribers."""
        output = recompute(
            self._clock(),
            self._data,
            show_seconds=self._show_seconds,
            upcoming_limit=self._upcoming_limit,
        )
        self._snapshot = output
        self._notify(output)
        return output

    def update_data(self, data: TradingData) -> EngineOutput:
        """Swap in a new configuration snapshot and recompute immediately."""
        logger.info(
            "Trading data updated: %d killzones, %d macros, %d sessions, %d news instances",
            len(data.killzones), len(data.macros), len(data.market_sessions),
            len(data.news_instances),
        )
        self._data = data
        return self.refresh()

    def set_show_seconds(self, show_seconds: bool) -> EngineOutput:
        self._show_seconds = show_seconds
        return self.refresh()

    async def tick(self) -> EngineOutput:
        """Periodic entry point: refresh and announce a status change, if any."""
        self._tick_count += 1
        async with log_context(tick_id=str(self._tick_count), timezone=self._data.user_timezone):
            output = self.refresh()
            async with log_context(status=output.status.value):
                await self._announce_transition(output)
        return output

    def _notify(self, output: EngineOutput) -> None:
        for callback in list(self._subscribers):
            try:
                callback(output)
            except Exception:
                logger.exception(
                    "Status subscriber %s failed",
                    getattr(callback, "__name__", callback),
                )

    async def _announce_transition(self, output: EngineOutput) -> None:
        previous = self._last_announced
        self._last_announced = output.status
        if previous is None or previous is output.status:
            return
        if self._event_bus is None:
            logger.info(
                "Status changed %s -> %s: %s",
                previous.value, output.status.value, output.period,
            )
            return
        await self._event_bus.emit(
            StatusChangedEvent(
                previous=previous,
                current=output.status,
                period=output.period,
                at=output.evaluated_at,
            )
        )
