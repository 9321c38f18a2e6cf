"""Domain Value Objects.

Value objects are immutable objects that describe domain concepts by their attributes
rather than their identity.
"""

from .identity import IdentityContext
from .person_id import PersonId
from .role import Role, has_any, satisfies

__all__ = [
    "IdentityContext",
    "PersonId",
    "Role",
    "has_any",
    "satisfies",
]
