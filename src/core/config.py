"""
Runtime settings, read from environment variables.

Every setting has a default, so the engine runs without any configuration.
"""

import logging
import os
from typing import Self

from pydantic import BaseModel, Field

DEFAULT_COUNTDOWN = 10
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseModel):
    initial_countdown: int = Field(default=DEFAULT_COUNTDOWN, ge=1)
    tick_interval_sec: float = Field(default=1.0, gt=0)
    # In-memory SQLite: matches live as long as the process does
    database_url: str = "sqlite:///:memory:"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Values arrive as strings, pydantic converts them (and raises ValidationError on garbage)."""
        return cls.model_validate(
            {
                "initial_countdown": os.environ.get(
                    "SOS_INITIAL_COUNTDOWN", str(DEFAULT_COUNTDOWN)
                ),
                "tick_interval_sec": os.environ.get("SOS_TICK_INTERVAL_SEC", "1.0"),
                "database_url": os.environ.get("SOS_DATABASE_URL")
                or "sqlite:///:memory:",
                "log_level": os.environ.get("SOS_LOG_LEVEL", "INFO").upper(),
            }
        )


def configure_logging(settings: Settings) -> None:
    """For host applications (scripts, servers) that did not set up logging themselves."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
