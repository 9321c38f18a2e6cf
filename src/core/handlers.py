"""
Exception handlers that turn lab errors into HTTP responses.

Denials carry one generic, translated body per status so a caller cannot
tell a missing record from a hidden one. Internal failures never leak their
message to the client.
"""

from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from src.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    DocumentRenderError,
    LabError,
    PermissionError,
    ValidationError,
)
from src.utils.i18n import get_request_language, get_translated_message

__all__ = [
    "authentication_error_handler",
    "permission_error_handler",
    "validation_error_handler",
    "request_validation_error_handler",
    "database_error_handler",
    "document_render_error_handler",
    "lab_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _translated(
    request: Request, status_code: int, key: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    detail = get_translated_message(key, get_request_language(request))
    return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)


def _denial_context(request: Request, exc: LabError) -> dict:
    return {
        "error": exc.code,
        "client_ip": request.client.host if request.client else "unknown",
        "path": request.url.path,
        "method": request.method,
    }


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """401 with a Bearer challenge.

    Missing, malformed, expired and untrusted tokens all produce this same
    response.
    """
    logger.warning("access_denied_anonymous", **_denial_context(request, exc))
    return _translated(
        request,
        status.HTTP_401_UNAUTHORIZED,
        "authentication_required",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_error_handler(request: Request, exc: PermissionError) -> JSONResponse:
    """403 for a role the caller lacks or a record it may not see.

    ``exc.message`` stays in the log; the body is always the generic text.
    """
    logger.warning("access_denied", reason=exc.message, **_denial_context(request, exc))
    return _translated(request, status.HTTP_403_FORBIDDEN, "forbidden")


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """400 listing each rejected field of a malformed payload."""
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info("request_rejected", path=request.url.path, fields=len(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.critical("store_failure", error_message=str(exc), path=request.url.path)
    return _translated(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "database_error")


async def document_render_error_handler(request: Request, exc: DocumentRenderError) -> JSONResponse:
    logger.error("render_failure", error_message=str(exc), path=request.url.path)
    return _translated(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "document_render_error")


async def lab_error_handler(request: Request, exc: LabError) -> JSONResponse:
    """Fallback for lab errors without a dedicated handler."""
    logger.error("unhandled_lab_error", error_code=exc.code, error_message=exc.message, path=request.url.path)
    return _translated(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "unexpected_error")


_HANDLERS = (
    (AuthenticationError, authentication_error_handler),
    (PermissionError, permission_error_handler),
    (ValidationError, validation_error_handler),
    (RequestValidationError, request_validation_error_handler),
    (DatabaseError, database_error_handler),
    (DocumentRenderError, document_render_error_handler),
    (LabError, lab_error_handler),
)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to ``app``, subclasses before `LabError`."""
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)
