"""Composed settings of the lab service.

`Settings` merges the app, database and auth settings into one object; the
module-level `settings` instance is what the rest of the code imports.

The ``.env`` file is picked from ``APP_ENV``:

- development: ``.env``
- test: ``.env.test``
- staging: ``.env.staging``
- production: ``.env.production``

A missing environment-specific file falls back to ``.env`` and then to the
process environment alone.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ENV_FILES = {
    "development": ".env",
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
}

REQUIRED_FIELDS = ("PROJECT_NAME", "DATABASE_URL", "JWT_ISSUER", "JWT_PUBLIC_KEY", "JWT_PRIVATE_KEY")


class Settings(AppSettings, DatabaseSettings, AuthSettings):
    """All configuration of the lab in one place.

    Security Note:
        - The private key signs demo tokens only; it is never logged.
        - ``DEMO_TOKENS_ENABLED`` hands out tokens for any role and is reported
          loudly when left on in production.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="allow"
    )

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def apply_environment_defaults(self) -> None:
        """Adjust values that depend on ``APP_ENV``."""
        if self.APP_ENV == "development":
            self.DEBUG = True
        if self.is_production and self.DEMO_TOKENS_ENABLED:
            logger.warning("DEMO_TOKENS_ENABLED is on in production; anyone can mint an admin token")
        logger.info("Settings loaded for %s (debug=%s)", self.APP_ENV, self.DEBUG)

    def validate_required_fields(self) -> None:
        """Fail fast when a mandatory value is empty.

        Raises:
            ValueError: Naming every missing field.
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name, None)]
        if missing:
            message = f"Missing required environment variables: {', '.join(missing)}"
            logger.error(message)
            raise ValueError(message)


def _select_env_file(env: str) -> Optional[str]:
    candidate = ENV_FILES.get(env, ".env")
    if Path(candidate).exists():
        return candidate
    if Path(".env").exists():
        return ".env"
    return None


def create_settings() -> Settings:
    """Build `Settings` from the env file matching ``APP_ENV``."""
    env = os.getenv("APP_ENV", "development")
    env_file = _select_env_file(env)
    if env_file is None:
        logger.info("No env file found for %s, using the process environment", env)
        instance = Settings(_env_file=None)
    else:
        logger.info("Loading configuration from %s", env_file)
        instance = Settings(_env_file=env_file)
    instance.apply_environment_defaults()
    return instance


settings = create_settings()
settings.validate_required_fields()
settings.SUPPORTED_LANGUAGES = ["en", "it"]
