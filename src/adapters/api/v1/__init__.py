"""API v1 router configuration.

Paths are mounted at the root to match the lab's published URLs
(``/doc/...``, ``/demo/...``).
"""

from fastapi import APIRouter

from .demo import router as demo_router
from .documents import router as documents_router
from .health import router as health_router
from .people import router as people_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(documents_router, prefix="/doc", tags=["document"])
api_router.include_router(people_router, prefix="/doc", tags=["person"])
api_router.include_router(demo_router, prefix="/demo", tags=["jwt authorization demo"])
