"""Turns endpoint gate verdicts into the errors the API reports."""

from typing import Optional

from structlog import get_logger

from src.core.exceptions import AuthenticationError, PermissionError
from src.domain.services.access.decision import AccessDecisionEngine, Allowed
from src.domain.value_objects.identity import IdentityContext
from src.permissions.gates import GatePolicy, Operation

logger = get_logger(__name__)


def enforce_gate(
    gates: GatePolicy,
    identity: IdentityContext,
    operation: Operation,
    engine: Optional[AccessDecisionEngine] = None,
) -> None:
    """Raise unless ``identity`` may invoke ``operation``.

    Raises:
        AuthenticationError: The caller is anonymous and the operation
            requires a role.
        PermissionError: The caller holds none of the allowed roles.
    """
    allowed_roles = gates.allowed_roles(operation)
    if not identity.authenticated and allowed_roles:
        logger.info("Operation requires authentication", operation=str(operation))
        raise AuthenticationError()

    verdict = (engine or AccessDecisionEngine()).check_endpoint(identity, allowed_roles)
    if not isinstance(verdict, Allowed):
        logger.info(
            "Endpoint gate denied",
            operation=str(operation),
            subject=identity.subject,
            roles=identity.role_names,
        )
        raise PermissionError()
