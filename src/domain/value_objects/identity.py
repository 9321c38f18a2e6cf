"""Identity context of the caller bound to a single request."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .role import Role


@dataclass(frozen=True)
class IdentityContext:
    """Immutable set of roles extracted from a verified credential.

    ``authenticated`` separates "no verified credential" from "verified
    credential that carries no roles"; both have an empty role set.
    """

    roles: frozenset[Role] = field(default_factory=frozenset)
    authenticated: bool = False
    subject: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "IdentityContext":
        return cls()

    @classmethod
    def verified(cls, roles: Iterable[Role], subject: Optional[str] = None) -> "IdentityContext":
        return cls(roles=frozenset(roles), authenticated=True, subject=subject)

    @property
    def role_names(self) -> list[str]:
        return sorted(role.value for role in self.roles)
