"""Demo token endpoint.

Issues signed bearer tokens for any combination of lab roles so the
endpoints can be exercised without an identity provider. It can be switched
off with ``DEMO_TOKENS_ENABLED=false``.
"""

import structlog
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from src.core.config.settings import settings
from src.core.dependencies.auth import TokenServiceDep
from src.core.exceptions import ValidationError
from src.domain.value_objects.role import Role
from src.utils.i18n import get_request_language, get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter()

DEMO_SUBJECT = "DEMOUSER"


@router.get(
    "/{roles}.txt",
    response_class=PlainTextResponse,
    summary="Generate a demo JWT for a comma-separated list of roles",
    responses={
        400: {"description": "Unknown or missing role"},
        404: {"description": "Demo tokens are disabled"},
    },
)
def demo_token(roles: str, request: Request, token_service: TokenServiceDep):
    language = get_request_language(request)
    if not settings.DEMO_TOKENS_ENABLED:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=get_translated_message("demo_tokens_disabled", language),
        )

    names = [name.strip() for name in roles.split(",") if name.strip()]
    if not names:
        raise ValidationError(get_translated_message("no_roles_requested", language))
    for name in names:
        try:
            Role(name)
        except ValueError:
            raise ValidationError(get_translated_message("unknown_role", language).format(role=name))

    token = token_service.create_access_token(DEMO_SUBJECT, Role.parse_many(names))
    logger.info("Demo token issued", roles=sorted(names))
    return PlainTextResponse(token)
