"""Shared fixtures for the candy registry tests."""

import base64

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application

ADMIN_PASSWORD = "s3cret-candy"


@pytest.fixture
def settings():
    return Settings(ADMIN_PASSWORD=ADMIN_PASSWORD, _env_file=None)


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    """Create a test client with the lifespan running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gummy():
    """A valid candy payload."""
    return {"name": "gummy", "kind": "bear"}


@pytest.fixture
def basic_auth():
    """Build an HTTP Basic Authorization header."""
    def _header(username, password):
        token = base64.b64encode(f"{username}:{password}".encode()).decode()
        return {"Authorization": f"Basic {token}"}
    return _header
