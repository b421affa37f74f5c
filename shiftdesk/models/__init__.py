# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from shiftdesk.models.base import Base, TimestampMixin
from shiftdesk.models.employee import Employee
from shiftdesk.models.enums import (
    ACTIVE_ISSUE_STATUSES,
    SOLVED_ISSUE_STATUSES,
    IssuePriority,
    IssueStatus,
    UserRole,
)
from shiftdesk.models.issue import Issue
from shiftdesk.models.session import Session
from shiftdesk.models.shift import Shift
from shiftdesk.models.user import User

__all__ = [
    "ACTIVE_ISSUE_STATUSES",
    "Base",
    "Employee",
    "Issue",
    "IssuePriority",
    "IssueStatus",
    "SOLVED_ISSUE_STATUSES",
    "Session",
    "Shift",
    "TimestampMixin",
    "User",
    "UserRole",
]
