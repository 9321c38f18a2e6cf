"""Error messages follow the caller's language without revealing causes."""

import pytest

from src.infrastructure.database.seed import ID_RICHARD_FEYNMAN


@pytest.mark.parametrize(
    "language, expected",
    [("en", "Forbidden"), ("it", "Accesso negato"), ("fr", "Forbidden")],
)
def test_forbidden_message_is_translated(client, guest_headers, language, expected):
    response = client.get("/doc/example.pdf", headers={**guest_headers, "Accept-Language": language})
    assert response.status_code == 403
    assert response.json() == {"detail": expected}


def test_unauthorized_message_from_query_parameter(client):
    response = client.get("/doc/example.pdf?lang=it")
    assert response.status_code == 401
    assert response.json() == {"detail": "Autenticazione richiesta"}
    assert response.headers["Content-Language"] == "it"


def test_object_denial_uses_the_same_message(client, user_headers):
    response = client.get(f"/doc/person/find/{ID_RICHARD_FEYNMAN}", headers={**user_headers, "Accept-Language": "it"})
    assert response.json() == {"detail": "Accesso negato"}
