"""
Structured logging for the lab service.

structlog renders every event as one line: JSON when ``LOG_JSON`` is set,
coloured key/value pairs otherwise. Events go through the standard library
so uvicorn and the application share one handler and one level.
"""

import logging
import sys

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def configure_logging(log_level: str = "INFO", json_logs: bool = False):
    """Configure structlog and the root logger.

    Args:
        log_level: Level name applied to the root logger.
        json_logs: Render JSON instead of console output.
    """
    level = logging.getLevelName(log_level.upper())

    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(logging.StreamHandler(sys.stdout))

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *_SHARED_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger("bac_lab")
