"""Builds the FastAPI app: middleware, error handlers and the v1 routers."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.adapters.api.v1 import api_router
from src.core.config.settings import settings
from src.core.handlers import register_exception_handlers
from src.core.lifecycle import create_lifespan_manager
from src.core.middleware import configure_middleware


def create_application() -> FastAPI:
    """Return a configured app.

    ``/docs`` lists the bearer scheme on protected routes so tokens from
    ``/demo/{roles}.txt`` can be tried there.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        debug=settings.DEBUG,
        default_response_class=JSONResponse,
        lifespan=create_lifespan_manager(),
    )
    configure_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app
