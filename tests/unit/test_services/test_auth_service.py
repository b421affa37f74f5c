# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

import uuid
from datetime import timedelta

from shiftdesk.models import UserRole
from shiftdesk.models.base import utcnow
from shiftdesk.models.session import Session as SessionModel
from shiftdesk.services import auth_service


def test_authenticate_by_email(db_session, employee_user):
    user = auth_service.authenticate(
        db_session, "Alice@Example.com", "alicepassword123"
    )
    assert user is not None
    assert user.id == employee_user.id


def test_authenticate_by_employee_code(db_session, employee_user):
    user = auth_service.authenticate(db_session, "emp001", "alicepassword123")
    assert user is not None
    assert user.id == employee_user.id


def test_authenticate_wrong_password(db_session, employee_user):
    assert auth_service.authenticate(db_session, "EMP001", "wrong") is None


def test_authenticate_unknown_identifier(db_session):
    assert auth_service.authenticate(db_session, "nobody", "whatever") is None


def test_authenticate_inactive_user(db_session, employee_user):
    employee_user.is_active = False
    db_session.commit()
    assert (
        auth_service.authenticate(db_session, "alice@example.com", "alicepassword123")
        is None
    )


def test_authenticate_role_restriction(db_session, employee_user, admin_user):
    assert (
        auth_service.authenticate(
            db_session, "alice@example.com", "alicepassword123", role=UserRole.ADMIN
        )
        is None
    )
    admin = auth_service.authenticate(
        db_session, "admin@example.com", "adminpassword123", role=UserRole.ADMIN
    )
    assert admin is not None
    assert admin.is_admin


def test_create_user_normalizes_email(db_session, employee):
    user = auth_service.create_user(
        db_session, " Bob@Example.COM ", "password123", employee_id=employee.id
    )
    assert user.email == "bob@example.com"
    assert user.role == UserRole.USER
    assert user.hashed_password != "password123"


def test_session_lifecycle(db_session, employee_user):
    token = auth_service.create_session(db_session, employee_user.id)

    session = auth_service.get_session(db_session, token)
    assert session is not None
    assert session.user_id == employee_user.id

    assert auth_service.delete_session(db_session, token) is True
    assert auth_service.get_session(db_session, token) is None
    assert auth_service.delete_session(db_session, token) is False


def test_expired_session_is_removed(db_session, employee_user):
    token = auth_service.create_session(db_session, employee_user.id)
    session = db_session.query(SessionModel).filter_by(token=token).first()
    session.expires_at = utcnow() - timedelta(minutes=1)
    db_session.commit()

    assert auth_service.get_session(db_session, token) is None
    assert db_session.query(SessionModel).count() == 0


def test_session_start_and_expiry():
    user_id = uuid.uuid4()
    session = SessionModel.start(user_id, timedelta(days=7))

    assert session.user_id == user_id
    assert len(session.token) == 36
    assert session.expires_at - session.created_at == timedelta(days=7)
    assert not session.is_expired()
    assert session.is_expired(session.expires_at)
    assert session.is_expired(session.expires_at + timedelta(seconds=1))


def test_sessions_get_distinct_tokens(db_session, employee_user):
    first = auth_service.create_session(db_session, employee_user.id)
    second = auth_service.create_session(db_session, employee_user.id)
    assert first != second


def test_change_password(db_session, employee_user):
    changed = auth_service.change_password(
        db_session, employee_user, "alicepassword123", "n3wpassword"
    )

    assert changed is True
    assert auth_service.authenticate(db_session, "EMP001", "n3wpassword") is not None
    assert auth_service.authenticate(db_session, "EMP001", "alicepassword123") is None


def test_change_password_wrong_current(db_session, employee_user):
    old_hash = employee_user.hashed_password

    changed = auth_service.change_password(
        db_session, employee_user, "wrong", "n3wpassword"
    )

    assert changed is False
    db_session.refresh(employee_user)
    assert employee_user.hashed_password == old_hash
