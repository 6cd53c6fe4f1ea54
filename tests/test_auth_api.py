"""
HTTP-level tests for register / login.
"""

import pytest
from fastapi.testclient import TestClient

from auth.jwt import TokenService
from main import create_app

CREDENTIALS = {"email": "a@b.com", "password": "x"}


class _Clock:
    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRegister:
    def test_register(self, client, app):
        response = client.post("/register", json=CREDENTIALS)
        assert response.status_code == 201
        assert response.json() == {"message": "User registered"}

        stored = app.state.credential_store.find_by_email("a@b.com")
        assert stored.password_hash != "x"
        assert "password" not in response.text

    def test_duplicate_email(self, client):
        client.post("/register", json=CREDENTIALS)
        response = client.post("/register", json=CREDENTIALS)
        assert response.status_code == 400
        assert response.json() == {"message": "Email already exists"}

    @pytest.mark.parametrize(
        "body",
        [{}, {"email": "a@b.com"}, {"password": "x"}, {"email": "", "password": "x"}, {"email": "a@b.com", "password": ""}],
    )
    def test_missing_fields(self, client, body):
        response = client.post("/register", json=body)
        assert response.status_code == 400
        assert response.json() == {"message": "Email and password are required"}

    def test_no_body(self, client):
        response = client.post("/register")
        assert response.status_code == 400
        assert response.json() == {"message": "Email and password are required"}


class TestLogin:
    def test_login_issues_verifiable_token(self, client, app, settings):
        client.post("/register", json=CREDENTIALS)
        response = client.post("/login", json=CREDENTIALS)
        assert response.status_code == 200

        claims = TokenService(settings.jwt_secret).verify_token(response.json()["token"])
        assert claims.email == "a@b.com"
        assert claims.id == 1
        assert claims.expires_at - claims.issued_at == 3600

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        client.post("/register", json=CREDENTIALS)
        wrong_password = client.post("/login", json={"email": "a@b.com", "password": "y"})
        unknown_email = client.post("/login", json={"email": "z@b.com", "password": "x"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"message": "Invalid email or password"}

    def test_missing_fields(self, client):
        response = client.post("/login", json={"email": "a@b.com"})
        assert response.status_code == 400
        assert response.json() == {"message": "Email and password are required"}

    def test_token_from_other_secret_is_forbidden(self, client):
        token = TokenService("someone-else").create_token(1, "a@b.com")
        response = client.delete("/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403


class TestCors:
    def test_allowed_origin_echoed(self, client):
        response = client.get("/hello", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_unknown_origin_not_echoed(self, client):
        response = client.get("/hello", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in response.headers


class TestLongPasswords:
    def test_register_and_login_beyond_72_bytes(self, client):
        credentials = {"email": "long@b.com", "password": "p" * 80}
        assert client.post("/register", json=credentials).status_code == 201
        response = client.post("/login", json=credentials)
        assert response.status_code == 200
        assert "token" in response.json()


class TestTokenGating:
    def test_non_ascii_signature_is_forbidden(self, client):
        response = client.delete("/users", headers={"Authorization": b"Bearer e30=.\xe9\xe9"})
        assert response.status_code == 403
        assert response.json() == {"message": "Invalid token"}

    def test_expired_token_is_forbidden(self, settings):
        clock = _Clock()
        tokens = TokenService(settings.jwt_secret, expiry_seconds=3600, clock=clock)
        with TestClient(create_app(settings=settings, token_service=tokens)) as client:
            client.post("/register", json=CREDENTIALS)
            token = client.post("/login", json=CREDENTIALS).json()["token"]
            headers = {"Authorization": f"Bearer {token}"}

            clock.now += 3599
            assert client.delete("/users", headers=headers).status_code == 204

            clock.now += 1
            response = client.delete("/users", headers=headers)
            assert response.status_code == 403
            assert response.json() == {"message": "Invalid token"}
