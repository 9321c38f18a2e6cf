from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import BaseModel

from src.core.config.settings import settings
from src.core.logging import logger
from src.infrastructure.database import check_database_health
from src.utils.i18n import get_request_language, get_translated_message

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    message: str
    services: Dict[str, Any]
    timestamp: datetime


def check_database_status() -> Dict[str, Any]:
    """Check the people store connection."""
    healthy = check_database_health()
    if not healthy:
        logger.error("database_health_check_failed")
    return {"status": "healthy" if healthy else "unhealthy"}


@router.get("", response_model=HealthResponse)
def health_check(request: Request):
    """Report service status; ``degraded`` when the store is unreachable."""
    db_health = check_database_status()
    return HealthResponse(
        status="ok" if db_health["status"] == "healthy" else "degraded",
        env=settings.APP_ENV,
        message=get_translated_message("health_status_ok", get_request_language(request)),
        services={"database": db_health},
        timestamp=datetime.now(timezone.utc),
    )
