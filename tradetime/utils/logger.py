"""Logging configuration for TradeTime.

Timestamps are written in UTC, the same frame the engine evaluates in, and
every record carries the tick fields from ``log_context`` (``-`` when unset).
"""

import logging
import sys
import time
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from tradetime.utils.log_context import TICK_FIELDS, current_fields

LOG_FORMAT = (
    "%(asctime)s [%(tick_id)s] [%(status)s] [%(timezone)s]"
    " [%(levelname)s] [%(name)s] %(message)s"
)
DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_NOISY_LOGGERS = ("apscheduler", "asyncio")


class TickContextFilter(logging.Filter):
    """Copy the current tick fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        fields = current_fields()
        for name in TICK_FIELDS:
            setattr(record, name, fields.get(name, "-"))
        return True


class UTCFormatter(logging.Formatter):
    converter = time.gmtime


def _level(name: str) -> int:
    numeric_level = getattr(logging, name.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {name!r}")
    return numeric_level


def configure_logging(
    level: str = "INFO",
    log_file: str | None = "tradetime.log",
    console_level: str = "ERROR",
) -> None:
    """Configure the ``tradetime`` logger.

    Args:
        level: Level of the ``tradetime`` logger (DEBUG, INFO, WARNING, ...).
        log_file: File rotated at UTC midnight with a week of backups.
            ``None`` or an empty string disables file logging.
        console_level: Threshold for the stdout handler.
    """
    numeric_level = _level(level)
    formatter = UTCFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    context_filter = TickContextFilter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setLevel(_level(console_level))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(log_path, when="midnight", backupCount=7, utc=True)
        )

    root = logging.getLogger("tradetime")
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(numeric_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
