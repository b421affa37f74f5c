# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from shiftdesk.api.deps import get_current_user, get_db
from shiftdesk.config import get_settings
from shiftdesk.models import User, UserRole
from shiftdesk.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    UserResponse,
)
from shiftdesk.schemas.common import MessageResponse
from shiftdesk.services import auth_service

router = APIRouter()


def _start_session(db: Session, response: Response, user: User) -> AuthResponse:
    token = auth_service.create_session(db, user.id)
    response.set_cookie(
        key="session",
        value=token,
        httponly=True,
        secure=False,  # Set to True in production
        samesite="lax",
        max_age=86400 * get_settings().session_expiry_days,
    )
    return AuthResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Login with an email address or employee code."""
    user = auth_service.authenticate(db, data.identifier, data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return _start_session(db, response, user)


@router.post("/admin/login", response_model=AuthResponse)
def admin_login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Login restricted to admin accounts."""
    user = auth_service.authenticate(
        db, data.identifier, data.password, role=UserRole.ADMIN
    )
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return _start_session(db, response, user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
    current_user: User = Depends(get_current_user),
) -> None:
    """Logout current user."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key="session")


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    data: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Change the current user's password."""
    if not auth_service.change_password(
        db, current_user, data.current_password, data.new_password
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password incorrect",
        )
    return MessageResponse(message="Password changed successfully")


@router.get("/me", response_model=AuthResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> AuthResponse:
    """Get current authenticated user."""
    return AuthResponse(user=UserResponse.model_validate(current_user))
