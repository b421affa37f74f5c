# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

import uuid

from pydantic import BaseModel, Field

from shiftdesk.models.enums import UserRole


class LoginRequest(BaseModel):
    """Login with an email address or an employee code."""

    identifier: str = Field(..., min_length=1, description="Email or employee code")
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Schema for the authenticated user."""

    id: uuid.UUID
    email: str
    role: UserRole
    employee_id: uuid.UUID | None = None

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Response for login and current-user requests."""

    user: UserResponse


class ChangePasswordRequest(BaseModel):
    """Change the current user's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)
