"""Unit tests for the exception handlers, called directly as coroutines."""

import json

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from src.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    DocumentRenderError,
    LabError,
    PermissionError,
    ValidationError,
)
from src.core.handlers import (
    authentication_error_handler,
    database_error_handler,
    document_render_error_handler,
    lab_error_handler,
    permission_error_handler,
    request_validation_error_handler,
    validation_error_handler,
)


def _request(language="en"):
    request = Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/doc/example.pdf",
            "query_string": b"",
            "headers": [],
            "client": ("127.0.0.1", 5000),
        }
    )
    request.state.language = language
    return request


def _body(response):
    return json.loads(response.body)


@pytest.mark.asyncio
async def test_authentication_error_is_401_with_bearer_challenge():
    response = await authentication_error_handler(_request(), AuthenticationError())
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert _body(response) == {"detail": "Authentication required"}


@pytest.mark.asyncio
async def test_permission_error_is_403_and_translated():
    response = await permission_error_handler(_request("it"), PermissionError())
    assert response.status_code == 403
    assert _body(response) == {"detail": "Accesso negato"}


@pytest.mark.asyncio
async def test_permission_error_body_hides_internal_message():
    response = await permission_error_handler(_request(), PermissionError("person 42 is admin only"))
    assert "42" not in response.body.decode()


@pytest.mark.asyncio
async def test_validation_error_is_400():
    response = await validation_error_handler(_request(), ValidationError("bad role"))
    assert response.status_code == 400
    assert _body(response) == {"detail": "bad role"}


@pytest.mark.asyncio
async def test_request_validation_error_lists_fields():
    exc = RequestValidationError(
        [{"loc": ("body", "firstName"), "msg": "Field required", "type": "missing"}]
    )
    response = await request_validation_error_handler(_request(), exc)
    assert response.status_code == 400
    assert _body(response) == {
        "detail": [{"loc": ["body", "firstName"], "msg": "Field required", "type": "missing"}]
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "handler, error",
    [
        (database_error_handler, DatabaseError("SELECT * FROM people failed")),
        (document_render_error_handler, DocumentRenderError("template missing")),
        (lab_error_handler, LabError("stack trace at people.py line 42")),
    ],
)
async def test_internal_errors_are_500_without_details(handler, error):
    response = await handler(_request(), error)
    assert response.status_code == 500
    assert error.message not in response.body.decode()
