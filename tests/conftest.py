import os

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


def generate_key_pair():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


# Settings are read once at import time, so the environment is prepared
# before anything under src is imported.
TEST_PRIVATE_KEY, TEST_PUBLIC_KEY = generate_key_pair()

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_JSON"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_DEMO_DATA"] = "true"
os.environ["DEMO_TOKENS_ENABLED"] = "true"
os.environ["JWT_PRIVATE_KEY"] = TEST_PRIVATE_KEY
os.environ["JWT_PUBLIC_KEY"] = TEST_PUBLIC_KEY
os.environ["JWT_PRIVATE_KEY_PATH"] = "tests/does-not-exist/private.pem"
os.environ["JWT_PUBLIC_KEY_PATH"] = "tests/does-not-exist/public.pem"

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import select  # noqa: E402

from src.domain.entities.person import Person  # noqa: E402
from src.domain.services.auth.token import TokenService  # noqa: E402
from src.domain.value_objects.identity import IdentityContext  # noqa: E402
from src.domain.value_objects.role import Role  # noqa: E402
from src.infrastructure.database import create_db_and_tables, get_db_session  # noqa: E402
from src.infrastructure.database.seed import seed_demo_people  # noqa: E402
from src.main import app  # noqa: E402

ID_NOT_EXISTING = "955b6a27-3da5-421f-a380-a86944e0c769"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    create_db_and_tables()


@pytest.fixture(autouse=True)
def demo_people(setup_database):
    """Reset the people table to the demo records before every test."""
    with get_db_session() as session:
        for person in session.exec(select(Person)).all():
            session.delete(person)
        session.commit()
        seed_demo_people(session)
    yield


@pytest.fixture(scope="function")
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def token_service() -> TokenService:
    return TokenService()


@pytest.fixture
def guest_token(token_service):
    return token_service.create_guest_token()


@pytest.fixture
def user_token(token_service):
    return token_service.create_user_token()


@pytest.fixture
def admin_token(token_service):
    return token_service.create_admin_token()


@pytest.fixture
def expired_token():
    return TokenService(duration_minutes=-5).create_admin_token()


@pytest.fixture
def foreign_token():
    """Well-formed admin token signed with a key the service does not trust."""
    private_key, public_key = generate_key_pair()
    return TokenService(private_key=private_key, public_key=public_key).create_admin_token()


@pytest.fixture
def unknown_person_id() -> str:
    return ID_NOT_EXISTING


@pytest.fixture
def guest_headers(guest_token):
    return bearer(guest_token)


@pytest.fixture
def user_headers(user_token):
    return bearer(user_token)


@pytest.fixture
def admin_headers(admin_token):
    return bearer(admin_token)


@pytest.fixture
def guest_identity() -> IdentityContext:
    return IdentityContext.verified({Role.GUEST}, subject="USER3")


@pytest.fixture
def user_identity() -> IdentityContext:
    return IdentityContext.verified({Role.USER, Role.GUEST}, subject="USER1")


@pytest.fixture
def admin_identity() -> IdentityContext:
    return IdentityContext.verified({Role.ADMIN, Role.USER, Role.GUEST}, subject="USER2")
