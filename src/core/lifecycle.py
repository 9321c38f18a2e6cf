"""Startup and shutdown of the lab: schema, demo records, log events."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config.settings import settings
from src.core.logging import logger
from src.infrastructure.database import check_database_health, create_db_and_tables, get_db_session
from src.infrastructure.database.seed import seed_demo_people


def create_lifespan_manager():
    """Return the lifespan context used by `create_application`."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Refuse to serve without a reachable store.
        if not check_database_health():
            logger.error("startup_aborted", reason="database unavailable")
            raise RuntimeError("Database unavailable")
        create_db_and_tables()

        seeded = 0
        if settings.SEED_DEMO_DATA:
            with get_db_session() as session:
                seeded = seed_demo_people(session)

        logger.info("lab_started", env=settings.APP_ENV, version=settings.VERSION, seeded=seeded)
        yield
        logger.info("lab_stopped", env=settings.APP_ENV)

    return lifespan
