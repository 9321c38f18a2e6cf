"""Access Decision Engine.

Pure decision logic combining endpoint-level gating (does the caller's role
set intersect the roles allowed to call an operation?) with object-level
gating (does the caller meet the minimum role of this particular record?).

Every outcome is returned as a verdict, never raised. Lookups by identifier go
through a single authorization-aware function so that "no such record",
"malformed identifier" and "record exists but the caller may not see it" all
produce the same `Denied` verdict.
"""

from dataclasses import dataclass
from typing import AbstractSet, Callable, Generic, Iterable, List, Optional, TypeVar, Union

from src.domain.entities.person import Person
from src.domain.value_objects.identity import IdentityContext
from src.domain.value_objects.person_id import PersonId
from src.domain.value_objects.role import Role, has_any, satisfies

T = TypeVar("T")


@dataclass(frozen=True)
class Allowed(Generic[T]):
    value: T


@dataclass(frozen=True)
class Denied:
    """Access refused. Deliberately carries no reason."""


DENIED = Denied()

Verdict = Union[Allowed[T], Denied]


class AccessDecisionEngine:
    """Stateless authorization decisions over people.

    The engine holds no state and can be shared between requests.
    """

    def check_endpoint(
        self, identity: IdentityContext, allowed_roles: AbstractSet[Role]
    ) -> Verdict[IdentityContext]:
        """Endpoint-level gate: the caller must hold one of ``allowed_roles``."""
        if has_any(identity.roles, allowed_roles):
            return Allowed(identity)
        return DENIED

    def visible(self, identity: IdentityContext, person: Person) -> bool:
        """Object-level gate for a single record."""
        return satisfies(identity.roles, person.min_role)

    def filter_visible(self, identity: IdentityContext, people: Iterable[Person]) -> List[Person]:
        """Keep, in order, exactly the records the caller may see."""
        return [person for person in people if self.visible(identity, person)]

    def find_authorized(
        self,
        identity: IdentityContext,
        raw_id: str,
        lookup: Callable[[str], Optional[Person]],
    ) -> Verdict[Person]:
        """Look up a person and apply the object gate in one step.

        Args:
            identity: The caller.
            raw_id: The identifier as received from the client.
            lookup: Store lookup by canonical identifier.

        Returns:
            `Allowed(person)` only when the record exists and the caller meets
            its minimum role; `Denied` otherwise.
        """
        person_id = PersonId.parse(raw_id)
        if person_id is None:
            return DENIED
        person = lookup(person_id)
        if person is None or not self.visible(identity, person):
            return DENIED
        return Allowed(person)

    def delete_authorized(
        self,
        identity: IdentityContext,
        raw_id: str,
        remover: Callable[[str], bool],
    ) -> Verdict[str]:
        """Remove a person, collapsing "absent" into `Denied`.

        The endpoint gate for deletion must already have passed; any caller
        allowed to delete may delete any record.
        """
        person_id = PersonId.parse(raw_id)
        if person_id is None or not remover(person_id):
            return DENIED
        return Allowed(person_id)
