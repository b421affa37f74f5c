# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shiftdesk.database import get_db
from shiftdesk.models import User
from shiftdesk.services import auth_service
from shiftdesk.services.errors import (
    EmployeeCodeExistsError,
    EmployeeHasShiftsError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    ShiftDeskError,
    ShiftValidationError,
)

__all__ = [
    "get_current_admin",
    "get_current_user",
    "get_db",
    "http_error",
]


def get_current_user(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> User:
    """Get current authenticated user from session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Get current user and verify they are an admin."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def http_error(error: ShiftDeskError) -> HTTPException:
    """Translate a service error into the HTTP error returned to clients."""
    if isinstance(error, ShiftValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "errors": error.messages,
                "codes": [violation.value for violation in error.violations],
            },
        )
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, EmployeeHasShiftsError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, InvalidInputError | EmployeeCodeExistsError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))
