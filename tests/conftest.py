import pytest
from fastapi.testclient import TestClient

from user_account_svc.app import create_app
from user_account_svc.config import Settings

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    return Settings(
        secret_key=TEST_SECRET,
        database_url="sqlite://",
        bcrypt_rounds=4,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client):
    def _register(email="a@b.com", login="alice", password="secret"):
        response = client.post("/register", json={"email": email, "login": login, "password": password})
        assert response.status_code == 201
        return response

    return _register


@pytest.fixture
def auth_headers(client):
    def _headers(login="alice", password="secret"):
        response = client.post("/login", json={"login": login, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _headers
