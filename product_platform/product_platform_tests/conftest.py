import pytest
from fastapi.testclient import TestClient

from product_platform.product_service.auth import create_access_token
from product_platform.product_service.config import Settings
from product_platform.product_service.main import create_app

TEST_SECRET = "test-secret-key-for-product-service-tests"  # pragma: allowlist secret


@pytest.fixture
def settings(tmp_path):
    return Settings(
        JWT_SECRET=TEST_SECRET,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        _env_file=None
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(app, client):
    """Session on the running app's database."""
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def auth_headers(client):
    login = client.post("/api/login", json={"username": "admin", "password": "admin"})
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.json()['token']}"}


@pytest.fixture
def auth_header_for(settings):
    """Build an Authorization header for any user id, optionally at a fixed issue time."""
    def _build(user_id: int, **kwargs):
        token = create_access_token(user_id, settings, **kwargs)
        return {"Authorization": f"Bearer {token}"}
    return _build
