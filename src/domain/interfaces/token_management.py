"""Credential verification interface.

The domain treats token verification as a black box that yields either a
verified `IdentityContext` or nothing.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from src.domain.value_objects.identity import IdentityContext
from src.domain.value_objects.role import Role


class ICredentialVerifier(ABC):
    """Verifies a raw bearer token."""

    @abstractmethod
    def verify(self, raw_token: str) -> Optional[IdentityContext]:
        """Returns the caller's identity, or `None` for any invalid token.

        Malformed, unsigned, wrongly signed, expired and foreign-issuer tokens
        all return `None`.
        """
        raise NotImplementedError


class ITokenIssuer(ABC):
    """Issues signed tokens for the lab's demo endpoint."""

    @abstractmethod
    def create_access_token(self, subject: str, roles: Iterable[Role]) -> str:
        raise NotImplementedError
