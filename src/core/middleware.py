"""HTTP middleware: CORS and response language."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.core.config.settings import settings
from src.utils.i18n import get_request_language


async def set_language_middleware(request: Request, call_next):
    """Store the negotiated language on ``request.state`` for the error
    handlers and report it in ``Content-Language``."""
    request.state.language = get_request_language(request)
    response = await call_next(request)
    response.headers["Content-Language"] = request.state.language
    return response


def configure_middleware(app: FastAPI) -> None:
    # Only bearer tokens are accepted, so no cookies cross origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "Accept-Language"],
    )
    app.middleware("http")(set_language_middleware)
