"""Process-level setup run once before the app object is built."""

from dotenv import load_dotenv

from src.core.config.settings import settings
from src.core.logging import configure_logging, logger
from src.utils.i18n import setup_i18n


def initialize_application() -> None:
    """Load ``.env`` without overriding the environment, then configure
    logging and the message catalogues."""
    load_dotenv(override=False)
    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    setup_i18n()
    logger.info(
        "lab_initialized",
        env=settings.APP_ENV,
        languages=settings.SUPPORTED_LANGUAGES,
        demo_tokens=settings.DEMO_TOKENS_ENABLED,
    )
