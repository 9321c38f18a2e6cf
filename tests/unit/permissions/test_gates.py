"""Unit tests for the operation-keyed gate table."""

import itertools

import pytest

from src.domain.interfaces.rendering import DocumentFormat
from src.domain.services.access.decision import AccessDecisionEngine, Allowed
from src.domain.value_objects.identity import IdentityContext
from src.domain.value_objects.role import Role
from src.permissions.enforcer import get_enforcer
from src.permissions.gates import (
    ADD_PERSON,
    DELETE_PERSON,
    FIND_PERSON,
    LIST_PEOPLE,
    GatePolicy,
    Operation,
    render_operation,
)

ADMIN = frozenset({Role.ADMIN})
ADMIN_USER = frozenset({Role.ADMIN, Role.USER})
EVERYONE = frozenset(Role)

ALL_OPERATIONS = [LIST_PEOPLE, FIND_PERSON, ADD_PERSON, DELETE_PERSON] + [
    render_operation(document_format) for document_format in DocumentFormat
]
ROLE_SETS = [
    frozenset(combo) for size in range(len(Role) + 1) for combo in itertools.combinations(Role, size)
]


@pytest.fixture
def gates():
    return GatePolicy(get_enforcer())


@pytest.mark.parametrize(
    "operation, expected",
    [
        (render_operation(DocumentFormat.MARKDOWN), EVERYONE),
        (render_operation(DocumentFormat.HTML), ADMIN_USER),
        (render_operation(DocumentFormat.JSON), ADMIN_USER),
        (render_operation(DocumentFormat.ASCIIDOC), ADMIN),
        (render_operation(DocumentFormat.PDF), ADMIN),
        (LIST_PEOPLE, ADMIN_USER),
        (FIND_PERSON, ADMIN_USER),
        (ADD_PERSON, ADMIN),
        (DELETE_PERSON, ADMIN),
    ],
)
def test_allowed_roles(gates, operation, expected):
    assert gates.allowed_roles(operation) == expected


def test_undeclared_operation_allows_nobody(gates):
    operation = Operation("person", "update")
    assert gates.allowed_roles(operation) == frozenset()


def test_resolution_is_cached(mocker):
    enforcer = mocker.Mock()
    enforcer.enforce.return_value = True
    gates = GatePolicy(enforcer)
    gates.allowed_roles(ADD_PERSON)
    gates.allowed_roles(ADD_PERSON)
    assert enforcer.enforce.call_count == len(Role)


def test_operation_str():
    assert str(render_operation(DocumentFormat.PDF)) == "document:pdf:render"


@pytest.mark.parametrize("operation", ALL_OPERATIONS, ids=str)
def test_adding_roles_never_revokes_access(gates, operation):
    engine = AccessDecisionEngine()
    allowed = gates.allowed_roles(operation)
    for smaller, larger in itertools.product(ROLE_SETS, repeat=2):
        if not smaller <= larger:
            continue
        if isinstance(engine.check_endpoint(IdentityContext.verified(smaller), allowed), Allowed):
            assert isinstance(engine.check_endpoint(IdentityContext.verified(larger), allowed), Allowed), (
                smaller,
                larger,
            )
