"""Document endpoints: endpoint gate per format and object filtering of content.

Each format is checked for every token state: missing, expired, signed by an
untrusted key, and the three canonical role sets.
"""

import pytest

DOCUMENTS = {
    "/doc/example.md": {"guest": 200, "user": 200, "admin": 200},
    "/doc/example.html": {"guest": 403, "user": 200, "admin": 200},
    "/doc/example.json": {"guest": 403, "user": 200, "admin": 200},
    "/doc/example.adoc": {"guest": 403, "user": 403, "admin": 200},
    "/doc/example.pdf": {"guest": 403, "user": 403, "admin": 200},
}

MEDIA_TYPES = {
    "/doc/example.md": "text/markdown",
    "/doc/example.html": "text/html",
    "/doc/example.json": "application/json",
    "/doc/example.adoc": "text/asciidoc",
    "/doc/example.pdf": "application/pdf",
}


@pytest.fixture
def role_headers(guest_headers, user_headers, admin_headers):
    return {"guest": guest_headers, "user": user_headers, "admin": admin_headers}


@pytest.mark.parametrize("path", list(DOCUMENTS))
def test_missing_token_is_unauthorized(client, path):
    response = client.get(path)
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.parametrize("path", list(DOCUMENTS))
def test_expired_token_is_unauthorized(client, expired_token, path):
    response = client.get(path, headers={"Authorization": f"Bearer {expired_token}"})
    assert response.status_code == 401


@pytest.mark.parametrize("path", list(DOCUMENTS))
def test_untrusted_signature_is_unauthorized(client, foreign_token, path):
    response = client.get(path, headers={"Authorization": f"Bearer {foreign_token}"})
    assert response.status_code == 401


@pytest.mark.parametrize(
    "path, role, expected",
    [(path, role, status) for path, statuses in DOCUMENTS.items() for role, status in statuses.items()],
)
def test_role_matrix(client, role_headers, path, role, expected):
    response = client.get(path, headers=role_headers[role])
    assert response.status_code == expected
    if expected == 200:
        assert response.headers["content-type"].startswith(MEDIA_TYPES[path])
        assert response.content


def test_admin_markdown_includes_admin_only_person(client, admin_headers):
    response = client.get("/doc/example.md", headers=admin_headers)
    assert response.status_code == 200
    assert "Feynman" in response.text


def test_user_markdown_omits_admin_only_person(client, user_headers):
    """
    Scenario: object-level filtering of rendered documents.
    Context: Richard Feynman is restricted to admin; a caller holding user and
        guest may render the document but must not see him in it.
    """
    response = client.get("/doc/example.md", headers=user_headers)
    assert response.status_code == 200
    assert "Feynman" not in response.text
    assert "Hack" in response.text


def test_guest_markdown_shows_guest_and_unrestricted_people_only(client, guest_headers):
    body = client.get("/doc/example.md", headers=guest_headers).text
    assert "Turing" in body
    assert "Lovelace" in body
    assert "Hack" not in body
    assert "Feynman" not in body


def test_json_document_never_exposes_identifiers(client, user_headers):
    entries = client.get("/doc/example.json", headers=user_headers).json()
    assert {entry["lastName"] for entry in entries} == {"Hack", "Lovelace", "Turing"}
    for entry in entries:
        assert "id" not in entry
        assert "uuid" not in entry


def test_token_without_roles_is_forbidden(client, token_service):
    token = token_service.create_access_token("nobody", [])
    response = client.get("/doc/example.md", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_non_bearer_scheme_is_unauthorized(client, admin_token):
    response = client.get("/doc/example.md", headers={"Authorization": f"Basic {admin_token}"})
    assert response.status_code == 401
