# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for issue API endpoints."""

from datetime import timedelta

from shiftdesk.models import Shift
from shiftdesk.services.shift_validation import today_in

PAST = today_in("UTC") - timedelta(days=2)


def login(client, identifier, password, admin=False):
    """Switch the client's session to another user."""
    path = "/api/v1/auth/admin/login" if admin else "/api/v1/auth/login"
    response = client.post(
        path, json={"identifier": identifier, "password": password}
    )
    assert response.status_code == 200


def create_shift(db_session, employee):
    shift = Shift(
        employee_id=employee.id,
        date=PAST,
        start_time="09:00",
        end_time="13:00",
    )
    db_session.add(shift)
    db_session.commit()
    db_session.refresh(shift)
    return shift


class TestIssueFlow:
    """Employee reports, admin reads and resolves."""

    def test_report_and_resolve_with_correction(
        self, employee_client, db_session, employee, admin_user
    ):
        shift = create_shift(db_session, employee)
        response = employee_client.post(
            "/api/v1/issues",
            json={
                "title": "Left late",
                "description": "I worked until 14:00",
                "priority": "high",
                "shift_id": str(shift.id),
            },
        )
        assert response.status_code == 201
        issue = response.json()
        assert issue["shift_data"]["employee_code"] == "EMP001"
        assert issue["created_by_email"] == "alice@example.com"

        login(employee_client, "admin@example.com", "adminpassword123", admin=True)
        client = employee_client

        assert client.get("/api/v1/issues/unread-count").json() == {"count": 1}
        response = client.patch(f"/api/v1/issues/{issue['id']}/read")
        assert response.status_code == 200
        assert client.get("/api/v1/issues/unread-count").json() == {"count": 0}

        response = client.put(
            f"/api/v1/issues/{issue['id']}",
            json={
                "status": "resolved",
                "admin_response": "Corrected",
                "corrected_shift_data": {"start_time": "09:00", "end_time": "14:00"},
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "resolved"
        assert data["resolved_at"] is not None
        assert data["corrected_shift_data"]["duration"] == 5.0

        shift_response = client.get(f"/api/v1/shifts/{shift.id}")
        assert shift_response.json()["end_time"] == "14:00"

    def test_correction_breaking_rules_rejected(
        self, admin_client, db_session, employee, employee_user
    ):
        shift = create_shift(db_session, employee)
        login(admin_client, "alice@example.com", "alicepassword123")
        issue = admin_client.post(
            "/api/v1/issues",
            json={
                "title": "Wrong",
                "description": "Too long",
                "shift_id": str(shift.id),
            },
        ).json()
        login(admin_client, "admin@example.com", "adminpassword123", admin=True)

        response = admin_client.put(
            f"/api/v1/issues/{issue['id']}",
            json={"corrected_shift_data": {"start_time": "09:00", "end_time": "11:00"}},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["codes"] == ["min_duration"]


class TestIssueEndpoints:
    """Tests for /api/v1/issues."""

    def test_list_paginated(self, admin_client):
        for n in range(3):
            admin_client.post(
                "/api/v1/issues",
                json={"title": f"Issue {n}", "description": "text"},
            )

        response = admin_client.get("/api/v1/issues", params={"per_page": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["meta"]["total"] == 3
        assert body["meta"]["pages"] == 2
        assert body["meta"]["has_next"] is True
        assert body["meta"]["has_prev"] is False

    def test_filter_by_status(self, admin_client):
        admin_client.post(
            "/api/v1/issues", json={"title": "Open", "description": "text"}
        )

        response = admin_client.get("/api/v1/issues", params={"status": "closed"})

        assert response.json()["meta"]["total"] == 0

    def test_update_requires_admin(self, employee_client):
        issue = employee_client.post(
            "/api/v1/issues", json={"title": "Mine", "description": "text"}
        ).json()

        response = employee_client.put(
            f"/api/v1/issues/{issue['id']}", json={"status": "closed"}
        )
        assert response.status_code == 403

    def test_unread_count_requires_admin(self, employee_client):
        response = employee_client.get("/api/v1/issues/unread-count")
        assert response.status_code == 403

    def test_report_on_other_employees_shift(
        self, employee_client, db_session, other_employee
    ):
        shift = create_shift(db_session, other_employee)
        response = employee_client.post(
            "/api/v1/issues",
            json={"title": "Not mine", "description": "x", "shift_id": str(shift.id)},
        )
        assert response.status_code == 403

    def test_delete(self, admin_client):
        issue = admin_client.post(
            "/api/v1/issues", json={"title": "Gone", "description": "text"}
        ).json()

        assert admin_client.delete(f"/api/v1/issues/{issue['id']}").status_code == 200
        assert admin_client.get(f"/api/v1/issues/{issue['id']}").status_code == 404

    def test_date_only_correction_rejected(self, admin_client, db_session, employee):
        shift = create_shift(db_session, employee)
        issue = admin_client.post(
            "/api/v1/issues",
            json={"title": "Moved", "description": "x", "shift_id": str(shift.id)},
        ).json()

        response = admin_client.put(
            f"/api/v1/issues/{issue['id']}",
            json={"corrected_shift_data": {"date": PAST.isoformat()}},
        )

        assert response.status_code == 422
        db_session.refresh(shift)
        assert shift.date == PAST
        stored = admin_client.get(f"/api/v1/issues/{issue['id']}").json()
        assert stored["corrected_shift_data"] is None
