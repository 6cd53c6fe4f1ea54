"""
Shared fixtures: every test gets a fresh app with empty stores.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    credentials = {"email": "tester@example.com", "password": "s3cret"}
    assert client.post("/register", json=credentials).status_code == 201
    token = client.post("/login", json=credentials).json()["token"]
    return {"Authorization": f"Bearer {token}"}
