"""
Engine and session helpers for the people store.

SQLite is the default backend. Sessions are used from FastAPI's threadpool,
and the in-memory URL is pinned to one static connection so every session
sees the same data.
"""

import time
from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import text
from sqlmodel import Session, SQLModel, create_engine
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.core.config.settings import settings
from src.core.logging import logger
from src.domain.entities.person import Person  # noqa: F401  registers the table


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, **_engine_options(settings.DATABASE_URL))


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Open a session on the shared engine and close it on exit."""
    opened_at = time.perf_counter()
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
        logger.debug("db_session_closed", elapsed=round(time.perf_counter() - opened_at, 4))


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency; uncommitted work is rolled back when the request fails."""
    with get_db_session() as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise


def check_database_health() -> bool:
    """Run ``SELECT 1``; False when the store cannot be reached."""
    with get_db_session() as session:
        try:
            session.connection().execute(text("SELECT 1"))
        except OperationalError as e:
            logger.error("db_unreachable", url=engine.url.render_as_string(hide_password=True), error=str(e))
            return False
    return True


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(OperationalError),
    before_sleep=lambda state: logger.warning("db_schema_retry", attempt=state.attempt_number),
    reraise=True,
)
def create_db_and_tables() -> None:
    """Create the ``people`` table if it is missing.

    Raises:
        OperationalError: Once five attempts have failed.
    """
    SQLModel.metadata.create_all(engine)
    logger.info("db_schema_ready", tables=sorted(SQLModel.metadata.tables))
