"""Unit tests for the Role value object and its privilege order."""

import pytest

from src.domain.value_objects.role import Role, has_any, satisfies

ALL_ROLES = [Role.GUEST, Role.USER, Role.ADMIN]


def test_roles_are_strictly_ordered():
    assert Role.ADMIN.rank > Role.USER.rank > Role.GUEST.rank


def test_unknown_role_is_rejected_at_construction():
    with pytest.raises(ValueError):
        Role("superuser")


def test_parse_many_strips_whitespace():
    assert Role.parse_many([" admin", "guest "]) == frozenset({Role.ADMIN, Role.GUEST})


def test_parse_many_rejects_any_unknown_name():
    with pytest.raises(ValueError):
        Role.parse_many(["user", "root"])


@pytest.mark.parametrize(
    "held, required, expected",
    [
        (set(), None, True),
        ({Role.GUEST}, None, True),
        (set(), Role.GUEST, False),
        ({Role.GUEST}, Role.GUEST, True),
        ({Role.GUEST}, Role.USER, False),
        ({Role.USER}, Role.GUEST, True),
        ({Role.USER, Role.GUEST}, Role.ADMIN, False),
        ({Role.ADMIN}, Role.USER, True),
        ({Role.ADMIN}, Role.ADMIN, True),
    ],
)
def test_satisfies(held, required, expected):
    assert satisfies(frozenset(held), required) is expected


@pytest.mark.parametrize("required", ALL_ROLES + [None])
def test_satisfies_is_monotonic_in_held_roles(required):
    """Adding a role never turns an allowed requirement into a denied one."""
    for base in ALL_ROLES:
        if satisfies(frozenset({base}), required):
            for extra in ALL_ROLES:
                assert satisfies(frozenset({base, extra}), required)


def test_has_any():
    assert has_any(frozenset({Role.GUEST, Role.USER}), frozenset({Role.USER, Role.ADMIN}))
    assert not has_any(frozenset({Role.GUEST}), frozenset({Role.USER, Role.ADMIN}))
    assert not has_any(frozenset(), frozenset({Role.GUEST}))
    assert not has_any(frozenset({Role.ADMIN}), frozenset())
