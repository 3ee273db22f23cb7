"""Login, token verification and role enforcement tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from hr_api.config import get_settings
from hr_api.models.domain.user import UserRole
from hr_api.security.auth import create_access_token, decode_token
from hr_api.security.password import PasswordService
from tests.conftest import PASSWORD, USER_EMAIL


class TestLogin:
    def test_login_returns_token_and_user(self, client, seed_user):
        seed_user(USER_EMAIL, [UserRole.USER.value])

        response = client.post("/api/login_check", json={"email": USER_EMAIL, "password": PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "Bearer"
        assert body["expires_in"] == get_settings().jwt_expiration_seconds
        assert body["user"]["email"] == USER_EMAIL
        assert body["user"]["roles"] == [UserRole.USER.value]
        assert body["user"]["last_login_at"] is not None
        assert "password" not in body["user"]

        claims = decode_token(body["access_token"])
        assert claims["email"] == USER_EMAIL
        assert claims["iss"] == get_settings().jwt_issuer

    def test_email_is_case_insensitive(self, client, seed_user):
        seed_user(USER_EMAIL, [UserRole.USER.value])
        response = client.post(
            "/api/login_check", json={"email": USER_EMAIL.upper(), "password": PASSWORD}
        )
        assert response.status_code == 200

    @pytest.mark.parametrize(
        "email,password",
        [
            (USER_EMAIL, "wrong-password"),
            ("nobody@example.com", PASSWORD),
            ("not-an-email", PASSWORD),
        ],
    )
    def test_failed_login_is_indistinguishable(self, client, seed_user, email, password):
        seed_user(USER_EMAIL, [UserRole.USER.value])

        response = client.post("/api/login_check", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}
        assert "access_token" not in response.text
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.parametrize("email", ["nobody@example.com", "not-an-email"])
    def test_unknown_account_still_checks_a_password(self, client, seed_user, monkeypatch, email):
        seed_user(USER_EMAIL, [UserRole.USER.value])
        checked = []
        original = PasswordService.verify_password

        def recording_verify(service, password, hashed):
            checked.append(password)
            return original(service, password, hashed)

        monkeypatch.setattr(PasswordService, "verify_password", recording_verify)

        response = client.post("/api/login_check", json={"email": email, "password": PASSWORD})

        assert response.status_code == 401
        assert checked == [PASSWORD]

    def test_inactive_user_cannot_login(self, client, seed_user):
        seed_user(USER_EMAIL, [UserRole.USER.value], is_active=False)
        response = client.post("/api/login_check", json={"email": USER_EMAIL, "password": PASSWORD})
        assert response.status_code == 401

    def test_missing_fields_fail_validation(self, client):
        response = client.post("/api/login_check", json={"email": USER_EMAIL})
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Validation failed"
        assert {"field": "password", "message": "Field required"} in body["violations"]


class TestTokens:
    def test_me_returns_current_user(self, client, user_headers):
        response = client.get("/api/me", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["email"] == USER_EMAIL

    def test_missing_token(self, client):
        response = client.get("/api/employees")
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_garbage_token(self, client):
        response = client.get("/api/employees", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_expired_token(self, client):
        settings = get_settings()
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": str(uuid4()),
                "email": USER_EMAIL,
                "roles": [UserRole.USER.value],
                "iat": issued,
                "exp": issued + timedelta(hours=1),
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        response = client.get("/api/employees", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_signed_with_other_secret(self, client):
        settings = get_settings()
        token = jwt.encode(
            {"sub": str(uuid4()), "aud": settings.jwt_audience, "iss": settings.jwt_issuer},
            "a-completely-different-secret-value-0123456789",
            algorithm=settings.jwt_algorithm,
        )
        response = client.get("/api/employees", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_created_token_round_trips(self):
        user_id = uuid4()
        token, expires_at = create_access_token(user_id, USER_EMAIL, [UserRole.USER.value])
        claims = decode_token(token)
        assert claims["sub"] == str(user_id)
        assert claims["roles"] == [UserRole.USER.value]
        assert expires_at > datetime.now(timezone.utc)


class TestRoles:
    def test_regular_user_cannot_create_users(self, client, user_headers):
        response = client.post(
            "/api/users",
            json={"email": "new@example.com", "name": "New", "password": "another-password"},
            headers=user_headers,
        )
        assert response.status_code == 403
        assert response.json() == {"error": "Insufficient role"}

    def test_regular_user_cannot_delete_employees(self, client, user_headers):
        response = client.delete(f"/api/employees/{uuid4()}", headers=user_headers)
        assert response.status_code == 403


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
