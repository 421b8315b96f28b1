"""Application configuration loaded from environment variables."""

import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class AppConfig(BaseSettings):
    """Application configuration loaded from .env file and environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_file: str = Field(default="log/tradetime.log", description="Rotating log file; empty disables it")

    # Display
    user_timezone: str = Field(default="UTC", description="IANA timezone for the local clock")
    show_seconds: bool = Field(default=False, description="Always show seconds on clocks")
    upcoming_limit: int = Field(default=5, description="Max upcoming windows reported per tick")

    # Ticking
    tick_interval_seconds: float = Field(default=1.0, description="Seconds between status recomputations")

    # Trading data
    use_default_trading_data: bool = Field(
        default=True,
        description="Start with the built-in killzones, macros, sessions and news templates",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def _validate_ranges(self) -> "AppConfig":
        """Reject values the engine cannot run with.

        ``user_timezone`` is intentionally left unchecked: an unknown zone
        degrades to UTC display with a warning instead of refusing to start.
        """
        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            raise ValueError(f"Invalid log level: {self.log_level!r}")
        if self.upcoming_limit < 1:
            raise ValueError(f"upcoming_limit must be at least 1, got {self.upcoming_limit}")
        if self.tick_interval_seconds <= 0:
            raise ValueError(
                f"tick_interval_seconds must be positive, got {self.tick_interval_seconds}"
            )
        return self
