# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for authentication and health endpoints."""


class TestLogin:
    """Tests for /api/v1/auth login endpoints."""

    def test_login_with_employee_code(self, client, employee_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"identifier": "EMP001", "password": "alicepassword123"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "alice@example.com"
        assert "session" in response.cookies

    def test_login_wrong_password(self, client, employee_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"identifier": "alice@example.com", "password": "nope"},
        )
        assert response.status_code == 401

    def test_admin_login_refuses_regular_user(self, client, employee_user):
        response = client.post(
            "/api/v1/auth/admin/login",
            json={"identifier": "alice@example.com", "password": "alicepassword123"},
        )
        assert response.status_code == 401

    def test_me(self, admin_client):
        response = admin_client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "admin"

    def test_me_requires_session(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401

    def test_logout(self, employee_client):
        response = employee_client.post("/api/v1/auth/logout")
        assert response.status_code == 204

        response = employee_client.get("/api/v1/auth/me")
        assert response.status_code == 401


class TestChangePassword:
    """Tests for POST /api/v1/auth/change-password."""

    def test_requires_authentication(self, client):
        response = client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "x", "new_password": "newpassword"},
        )
        assert response.status_code == 401

    def test_change_then_login_with_new_password(self, employee_client):
        response = employee_client.post(
            "/api/v1/auth/change-password",
            json={
                "current_password": "alicepassword123",
                "new_password": "freshpassword",
            },
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Password changed successfully"}

        response = employee_client.post(
            "/api/v1/auth/login",
            json={"identifier": "EMP001", "password": "freshpassword"},
        )
        assert response.status_code == 200

    def test_wrong_current_password(self, employee_client):
        response = employee_client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "nope", "new_password": "freshpassword"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Current password incorrect"

    def test_new_password_too_short(self, employee_client):
        response = employee_client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "alicepassword123", "new_password": "abc"},
        )
        assert response.status_code == 422


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "ok"}
