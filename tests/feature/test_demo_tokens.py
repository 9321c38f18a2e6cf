"""Demo token endpoint: tokens issued here unlock exactly their roles."""

import pytest

from src.core.config.settings import settings


def test_issued_token_is_plain_text(client):
    response = client.get("/demo/admin,user,guest.txt")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.count(".") == 2


@pytest.mark.parametrize(
    "roles, pdf_status, markdown_status",
    [
        ("guest", 403, 200),
        ("user,guest", 403, 200),
        ("admin", 200, 200),
    ],
)
def test_issued_token_grants_its_roles(client, roles, pdf_status, markdown_status):
    token = client.get(f"/demo/{roles}.txt").text
    headers = {"Authorization": f"Bearer {token}"}
    assert client.get("/doc/example.pdf", headers=headers).status_code == pdf_status
    assert client.get("/doc/example.md", headers=headers).status_code == markdown_status


def test_unknown_role_is_rejected(client):
    response = client.get("/demo/admin,root.txt")
    assert response.status_code == 400
    assert "root" in response.json()["detail"]


def test_empty_role_list_is_rejected(client):
    assert client.get("/demo/ , .txt").status_code == 400


def test_endpoint_can_be_disabled(client, monkeypatch):
    monkeypatch.setattr(settings, "DEMO_TOKENS_ENABLED", False)
    assert client.get("/demo/admin.txt").status_code == 404
