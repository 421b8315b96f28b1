"""Per-tick logging context.

``StatusMonitor.tick`` tags every record emitted while it runs with the tick
number, the user timezone and, once evaluated, the resulting status. The
fields live in one immutable mapping so nested blocks layer over the outer
ones and concurrent tasks never see each other's values.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from contextvars import ContextVar
from types import MappingProxyType

TICK_FIELDS = ("tick_id", "status", "timezone")

_EMPTY: Mapping[str, str] = MappingProxyType({})
_fields: ContextVar[Mapping[str, str]] = ContextVar("tradetime_log_fields", default=_EMPTY)


def current_fields() -> Mapping[str, str]:
    """Fields set by the enclosing ``log_context`` blocks, innermost winning."""
    return _fields.get()


@asynccontextmanager
async def log_context(**fields: str) -> AsyncIterator[None]:
    """Layer *fields* over the current context for the duration of the block."""
    unknown = sorted(set(fields) - set(TICK_FIELDS))
    if unknown:
        raise ValueError(f"Unknown context field(s): {', '.join(unknown)}")
    token = _fields.set(MappingProxyType({**_fields.get(), **fields}))
    try:
        yield
    finally:
        _fields.reset(token)
