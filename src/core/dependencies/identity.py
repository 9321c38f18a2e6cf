"""Resolves the caller's identity from the ``Authorization`` header."""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from structlog import get_logger

from src.domain.services.auth.token import TokenService
from src.domain.value_objects.identity import IdentityContext

logger = get_logger(__name__)

# auto_error is off: a missing header must reach the gate as an anonymous
# identity so that it can answer 401 itself.
bearer_scheme = HTTPBearer(auto_error=False, description="RS256 JWT issued by /demo/{roles}.txt")


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """Return the process-wide `TokenService`."""
    return TokenService()


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
Credentials = Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)]


def get_identity(
    request: Request, credentials: Credentials, token_service: TokenServiceDep
) -> IdentityContext:
    """Return the caller's `IdentityContext`.

    A missing, malformed, expired or wrongly signed token yields the anonymous
    identity; the gate decides whether that is acceptable.
    """
    if credentials is None:
        return IdentityContext.anonymous()

    identity = token_service.verify(credentials.credentials)
    if identity is None:
        logger.info("Invalid bearer token treated as anonymous", path=request.url.path)
        return IdentityContext.anonymous()
    return identity


Identity = Annotated[IdentityContext, Depends(get_identity)]
