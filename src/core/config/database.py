"""
Database connection settings.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
import logging

logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Defines settings for the people store.

    The lab runs on SQLite by default so it starts without any external service;
    any SQLAlchemy URL can be supplied through DATABASE_URL.

    Performance Note:
        - An in-memory URL ("sqlite://") keeps a single shared connection, which is
          what the test-suite uses.
    """
    DATABASE_URL: str = "sqlite:///./bac_lab.db"
    DATABASE_ECHO: bool = False
    SEED_DEMO_DATA: bool = True

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_db_url(cls, v: str | None) -> str:
        """
        Falls back to the default SQLite file when an empty URL is provided.

        Args:
            v: Explicitly provided URL or None.

        Returns:
            The URL to connect to.
        """
        if not v:
            logger.debug("DATABASE_URL empty, using default SQLite file.")
            return "sqlite:///./bac_lab.db"
        return v
