"""Resource operations over the people registry.

Each operation follows the same sequence:

1. the caller's `IdentityContext` is passed in explicitly;
2. the endpoint gate is checked first, an anonymous caller being reported as
   unauthenticated rather than forbidden;
3. the store is queried or modified;
4. object-level filtering, or the collapsed find-or-deny lookup, is applied;
5. rendering only ever sees the filtered list.

Denials are raised as `AuthenticationError` (401) or `PermissionError` (403).
The same `PermissionError` is raised whatever the cause, so a caller cannot
tell a missing role from a missing record.
"""

from dataclasses import dataclass
from typing import List, Optional

from structlog import get_logger

from src.core.exceptions import PermissionError
from src.domain.entities.person import Person
from src.domain.interfaces.rendering import DocumentFormat, IDocumentRenderer
from src.domain.interfaces.repositories import IPersonRepository
from src.domain.services.access.decision import AccessDecisionEngine, Allowed
from src.domain.services.access.enforcement import enforce_gate
from src.domain.value_objects.identity import IdentityContext
from src.domain.value_objects.role import Role
from src.permissions.gates import (
    ADD_PERSON,
    DELETE_PERSON,
    FIND_PERSON,
    LIST_PEOPLE,
    GatePolicy,
    Operation,
    render_operation,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class NewPerson:
    """Validated input of the add operation."""

    first_name: str
    last_name: str
    title: str
    min_role: Optional[Role] = None


class PersonService:
    """Orchestrates the access decision engine, the store and the renderer.

    Args:
        repository: The people store.
        renderer: The document rendering collaborator.
        gates: Endpoint gate table.
        engine: Access decision engine; a fresh stateless one by default.
    """

    def __init__(
        self,
        repository: IPersonRepository,
        renderer: IDocumentRenderer,
        gates: GatePolicy,
        engine: Optional[AccessDecisionEngine] = None,
    ):
        self.repository = repository
        self.renderer = renderer
        self.gates = gates
        self.engine = engine or AccessDecisionEngine()

    def _authorize(self, identity: IdentityContext, operation: Operation) -> None:
        enforce_gate(self.gates, identity, operation, self.engine)

    def _visible_people(self, identity: IdentityContext) -> List[Person]:
        people = self.repository.list_ordered()
        visible = self.engine.filter_visible(identity, people)
        logger.info(
            "People loaded",
            subject=identity.subject,
            roles=identity.role_names,
            total=len(people),
            visible=len(visible),
        )
        return visible

    def render_document(self, identity: IdentityContext, document_format: DocumentFormat) -> bytes:
        """Render the people visible to the caller in ``document_format``."""
        self._authorize(identity, render_operation(document_format))
        visible = self._visible_people(identity)
        logger.info("Rendering document", format=document_format.value, records=len(visible))
        return self.renderer.render(document_format, visible)

    def list_people(self, identity: IdentityContext) -> List[Person]:
        """List the people visible to the caller, ordered by last and first name."""
        self._authorize(identity, LIST_PEOPLE)
        return self._visible_people(identity)

    def find_person(self, identity: IdentityContext, raw_id: str) -> Person:
        """Return one person by its opaque identifier.

        Raises:
            PermissionError: If the identifier is malformed, unknown, or names
                a person the caller may not see.
        """
        self._authorize(identity, FIND_PERSON)
        verdict = self.engine.find_authorized(identity, raw_id, self.repository.get_by_uuid)
        if not isinstance(verdict, Allowed):
            logger.info("Find denied", subject=identity.subject, roles=identity.role_names)
            raise PermissionError()
        return verdict.value

    def add_person(self, identity: IdentityContext, new_person: NewPerson) -> Person:
        """Create a person; the store assigns its identifier and creation date."""
        self._authorize(identity, ADD_PERSON)
        person = self.repository.add(
            Person(
                first_name=new_person.first_name,
                last_name=new_person.last_name,
                title=new_person.title,
                min_role=new_person.min_role,
            )
        )
        logger.info(
            "Person added",
            subject=identity.subject,
            person=person.person_id.mask_for_logging(),
            min_role=person.min_role.value if person.min_role else None,
        )
        return person

    def delete_person(self, identity: IdentityContext, raw_id: str) -> None:
        """Delete a person.

        Raises:
            PermissionError: If the caller is not allowed to delete, or the
                identifier is malformed or unknown.
        """
        self._authorize(identity, DELETE_PERSON)
        verdict = self.engine.delete_authorized(identity, raw_id, self.repository.delete_by_uuid)
        if not isinstance(verdict, Allowed):
            logger.info("Delete denied", subject=identity.subject)
            raise PermissionError()
        logger.info("Person deleted", subject=identity.subject)
