"""Role value object and the privilege order used for minimum-role checks.

Roles form a total order: admin > user > guest. A caller may hold several
roles at once; its effective privilege is the highest rank it holds.
"""

from enum import Enum
from typing import AbstractSet, Iterable, Optional


class Role(str, Enum):
    """Represents a role within the lab (RBAC).

    Attributes:
        ADMIN: Full access, satisfies every minimum-role requirement.
        USER: Standard access, satisfies user and guest requirements.
        GUEST: Lowest tier, satisfies only guest requirements.
    """

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def parse_many(cls, values: Iterable[str]) -> frozenset["Role"]:
        """Converts role names into roles.

        Raises:
            ValueError: If any value is not one of admin, user, guest.
        """
        return frozenset(cls(value.strip()) for value in values)


_RANKS = {Role.GUEST: 1, Role.USER: 2, Role.ADMIN: 3}


def satisfies(held: AbstractSet[Role], required: Optional[Role]) -> bool:
    """Return True if ``held`` meets the minimum role ``required``.

    An unrestricted requirement (``None``) is met by any role set, including
    the empty one.
    """
    if required is None:
        return True
    return any(role.rank >= required.rank for role in held)


def has_any(held: AbstractSet[Role], allowed: AbstractSet[Role]) -> bool:
    """Return True if ``held`` and ``allowed`` share at least one role."""
    return not held.isdisjoint(allowed)
