"""User account endpoint tests."""

from uuid import uuid4

from tests.conftest import ADMIN_EMAIL


class TestUsers:
    def test_admin_creates_user(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={
                "email": "Clerk@Example.com",
                "name": "Payroll Clerk",
                "password": "clerk-password",
                "roles": ["ROLE_ADMIN"],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "clerk@example.com"
        assert set(body["roles"]) == {"ROLE_USER", "ROLE_ADMIN"}
        assert "password" not in body

        login = client.post(
            "/api/login_check", json={"email": "clerk@example.com", "password": "clerk-password"}
        )
        assert login.status_code == 200

    def test_duplicate_email_conflicts(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"email": ADMIN_EMAIL, "name": "Copy", "password": "another-password"},
            headers=admin_headers,
        )
        assert response.status_code == 409
        assert response.json()["error"] == "User with this email already exists"

    def test_short_password_is_rejected(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"email": "short@example.com", "name": "Short", "password": "abc"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert "at least 8 characters" in response.json()["error"]

    def test_unknown_role_fails_validation(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"email": "r@example.com", "name": "R", "password": "another-password", "roles": ["ROLE_ROOT"]},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_list_and_get(self, client, admin_headers, user_headers):
        listing = client.get("/api/users", headers=user_headers).json()
        assert listing["total"] == 2

        admin = next(u for u in listing["items"] if u["email"] == ADMIN_EMAIL)
        response = client.get(f"/api/users/{admin['id']}", headers=user_headers)
        assert response.status_code == 200
        assert "ROLE_ADMIN" in response.json()["roles"]

    def test_get_unknown_user(self, client, admin_headers):
        response = client.get(f"/api/users/{uuid4()}", headers=admin_headers)
        assert response.status_code == 404
