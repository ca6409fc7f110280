"""Shared test fixtures for all tests."""
import pytest
from fastapi.testclient import TestClient

from inventory_api.core.config import Settings
from inventory_api.core.database import Store
from inventory_api.main import create_app

TEST_SECRET = "test-secret-key"
TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "secret1"


def make_settings(**overrides) -> Settings:
    """Settings for an isolated in-memory database and cheap bcrypt."""
    values = {
        "JWT_SECRET_KEY": TEST_SECRET,
        "DATABASE_URL": "sqlite:///:memory:",
        "BCRYPT_ROUNDS": 4,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan running, so tables exist."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    """Bare store for repository and service tests."""
    store = Store("sqlite:///:memory:")
    store.create_all()
    yield store
    store.dispose()


@pytest.fixture
def db_session(store):
    with store.session() as session:
        yield session


@pytest.fixture
def registered_user(client):
    """Register the default test user."""
    response = client.post(
        "/auth/register",
        json={"email": TEST_EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def token(client, registered_user):
    response = client.post(
        "/auth/login",
        json={"email": TEST_EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    """Bearer headers for the default test user."""
    return {"Authorization": f"Bearer {token}"}
