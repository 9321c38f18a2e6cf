import uuid
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from jwt import PyJWTError, decode as jwt_decode, encode as jwt_encode
from structlog import get_logger

from src.core.config.settings import settings
from src.domain.interfaces.token_management import ICredentialVerifier, ITokenIssuer
from src.domain.value_objects.identity import IdentityContext
from src.domain.value_objects.role import Role

logger = get_logger(__name__)


class TokenService(ICredentialVerifier, ITokenIssuer):
    """Issues and verifies the lab's RS256 bearer tokens.

    Roles travel in the ``groups`` claim (configurable through
    ``JWT_ROLES_CLAIM``). Verification checks the signature, the issuer and
    the expiry; every failure collapses to `None` so that the HTTP layer
    treats the caller as unauthenticated without learning why.

    Attributes:
        private_key (str): PEM private key used to sign demo tokens.
        public_key (str): PEM public key used to verify tokens.
        issuer (str): Expected ``iss`` claim.
        duration (timedelta): Lifetime of issued tokens.
    """

    ALGORITHM = "RS256"

    def __init__(
        self,
        private_key: Optional[str] = None,
        public_key: Optional[str] = None,
        issuer: Optional[str] = None,
        duration_minutes: Optional[int] = None,
        roles_claim: Optional[str] = None,
    ):
        self.private_key = private_key or settings.JWT_PRIVATE_KEY.get_secret_value()
        self.public_key = public_key or settings.JWT_PUBLIC_KEY
        self.issuer = issuer or settings.JWT_ISSUER
        minutes = settings.JWT_DURATION_MINUTES if duration_minutes is None else duration_minutes
        self.duration = timedelta(minutes=minutes)
        self.roles_claim = roles_claim or settings.JWT_ROLES_CLAIM

    def create_access_token(self, subject: str, roles: Iterable[Role]) -> str:
        """Create a signed token for ``subject`` carrying ``roles``.

        Args:
            subject: Value of the ``sub`` and ``upn`` claims.
            roles: Roles to place in the roles claim.

        Returns:
            str: Encoded JWT.
        """
        now = datetime.now(timezone.utc)
        role_names = sorted(Role(role).value for role in roles)
        payload = {
            "iss": self.issuer,
            "sub": subject,
            "upn": subject,
            self.roles_claim: role_names,
            "iat": now,
            "exp": now + self.duration,
            "jti": str(uuid.uuid4()),
        }
        token = jwt_encode(payload, self.private_key, algorithm=self.ALGORITHM)
        logger.debug("Access token created", subject=subject, roles=role_names)
        return token

    def create_guest_token(self) -> str:
        return self.create_access_token("USER3", [Role.GUEST])

    def create_user_token(self) -> str:
        return self.create_access_token("USER1", [Role.USER, Role.GUEST])

    def create_admin_token(self) -> str:
        return self.create_access_token("USER2", [Role.ADMIN, Role.USER, Role.GUEST])

    def verify(self, raw_token: str) -> Optional[IdentityContext]:
        """Verify ``raw_token`` and extract the caller's identity.

        Returns:
            The verified `IdentityContext`, or `None` for any invalid token.
        """
        try:
            payload = jwt_decode(
                raw_token,
                self.public_key,
                algorithms=[self.ALGORITHM],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "iss", "sub"]},
            )
        except PyJWTError as exc:
            logger.info("Token rejected", reason=type(exc).__name__)
            return None

        claimed = payload.get(self.roles_claim) or []
        if isinstance(claimed, str):
            claimed = [claimed]
        elif not isinstance(claimed, list):
            logger.warning("Malformed roles claim ignored", subject=payload.get("sub"), claim=self.roles_claim)
            claimed = []
        roles = set()
        for name in claimed:
            try:
                roles.add(Role(name))
            except ValueError:
                logger.warning("Unknown role in token ignored", subject=payload.get("sub"), role=name)
        return IdentityContext.verified(roles, subject=payload.get("sub"))
