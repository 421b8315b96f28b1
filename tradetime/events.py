"""Status transition events and the bus that delivers them."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

from tradetime.models import TradingStatus

logger = logging.getLogger(__name__)

# Higher is better for trading
_STATUS_RANK = {
    TradingStatus.RED: 0,
    TradingStatus.AMBER: 1,
    TradingStatus.GREEN: 2,
}


@dataclass(frozen=True)
class StatusChangedEvent:
    """The traffic light changed colour between two ticks."""

    previous: TradingStatus
    current: TradingStatus
    period: str
    at: datetime

    @property
    def is_upgrade(self) -> bool:
        """True when conditions improved, e.g. red -> amber or amber -> green."""
        return _STATUS_RANK[self.current] > _STATUS_RANK[self.previous]


StatusHandler = Callable[[StatusChangedEvent], Awaitable[None]]


class EventBus:
    """Delivers status transitions to async handlers in subscription order.

    A failing handler is logged and skipped; the tick that emitted the event
    carries on.
    """

    def __init__(self) -> None:
        self._handlers: list[StatusHandler] = []

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: StatusHandler) -> Callable[[], None]:
        """Register *handler*; returns a callable that removes it again."""
        self._handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unsubscribe

    async def emit(self, event: StatusChangedEvent) -> int:
        """Await every handler with *event*; returns how many completed."""
        delivered = 0
        for handler in list(self._handlers):
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Handler %s failed for %s -> %s",
                    getattr(handler, "__name__", handler),
                    event.previous.value,
                    event.current.value,
                )
            else:
                delivered += 1
        return delivered
