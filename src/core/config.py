"""Application settings, read from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///./othello.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build the settings from the environment (falls back to the defaults above)."""
    return Settings(
        database_url=os.getenv("OTHELLO_DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=os.getenv("OTHELLO_LOG_LEVEL", "INFO").upper(),
    )
