"""Endpoint gate table.

Maps each resource operation to the set of roles allowed to invoke it, as
declared in ``policy.csv``. Gating is keyed by operation rather than by HTTP
route, so a second HTTP method bound to the same operation cannot slip
through ungated.
"""

from dataclasses import dataclass
from functools import lru_cache

import casbin

from src.domain.interfaces.rendering import DocumentFormat
from src.domain.value_objects.role import Role


@dataclass(frozen=True)
class Operation:
    resource: str
    action: str

    def __str__(self) -> str:
        return f"{self.resource}:{self.action}"


LIST_PEOPLE = Operation("person", "list")
FIND_PERSON = Operation("person", "find")
ADD_PERSON = Operation("person", "add")
DELETE_PERSON = Operation("person", "delete")


def render_operation(document_format: DocumentFormat) -> Operation:
    return Operation(f"document:{document_format.value}", "render")


class GatePolicy:
    """Resolves the allowed role set of an operation from the Casbin enforcer."""

    def __init__(self, enforcer: casbin.Enforcer):
        self._enforcer = enforcer
        self._allowed = lru_cache(maxsize=None)(self._resolve)

    def _resolve(self, operation: Operation) -> frozenset[Role]:
        return frozenset(
            role
            for role in Role
            if self._enforcer.enforce(role.value, operation.resource, operation.action)
        )

    def allowed_roles(self, operation: Operation) -> frozenset[Role]:
        """Roles allowed to invoke ``operation``; empty when none is declared."""
        return self._allowed(operation)
