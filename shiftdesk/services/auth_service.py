# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

import logging
import uuid
from datetime import timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from shiftdesk.config import get_settings
from shiftdesk.models import User, UserRole
from shiftdesk.models.session import Session as SessionModel
from shiftdesk.security import get_password_hash, verify_password
from shiftdesk.services import employee_service

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    email: str,
    password: str,
    role: UserRole = UserRole.USER,
    employee_id: uuid.UUID | None = None,
) -> User:
    """Create a user account."""
    user = User(
        email=email.strip().lower(),
        hashed_password=get_password_hash(password),
        role=role,
        employee_id=employee_id,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def find_user_by_identifier(db: Session, identifier: str) -> User | None:
    """Find a user by email, falling back to the linked employee's code.

    Both lookups ignore case.
    """
    value = identifier.strip()
    user = db.query(User).filter(func.lower(User.email) == value.lower()).first()
    if user:
        return user

    employee = employee_service.get_employee_by_code(db, value)
    if not employee:
        return None
    return db.query(User).filter(User.employee_id == employee.id).first()


def authenticate(
    db: Session,
    identifier: str,
    password: str,
    role: UserRole | None = None,
) -> User | None:
    """Authenticate a user by email or employee code and password.

    Args:
        db: Database session.
        identifier: Email address or employee code.
        password: Plain password.
        role: If given, only users with this role may log in.

    Returns:
        The user, or None if the credentials are not accepted.
    """
    user = find_user_by_identifier(db, identifier)
    if not user:
        return None
    if role is not None and user.role != role:
        logger.warning(f"Login for {user.id} refused: role {user.role.value}")
        return None
    if not verify_password(password, user.hashed_password):
        return None
    if not user.is_active:
        return None
    return user


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user and return its token."""
    lifetime = timedelta(days=get_settings().session_expiry_days)
    session = SessionModel.start(user_id, lifetime)
    db.add(session)
    db.commit()
    return session.token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token. Expired sessions are removed."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.is_expired():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        db.delete(session)
        db.commit()
        return True
    return False


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def change_password(
    db: Session, user: User, current_password: str, new_password: str
) -> bool:
    """Replace a user's password after checking the current one.

    Returns:
        False if the current password does not match; nothing is changed.
    """
    if not verify_password(current_password, user.hashed_password):
        logger.warning(f"Password change for user {user.id} refused")
        return False
    user.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password changed for user {user.id}")
    return True
