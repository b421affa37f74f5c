# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration."""

    ADMIN = "admin"
    USER = "user"


class IssueStatus(str, Enum):
    """Issue status enumeration.

    Status flow:
        OPEN → IN_PROGRESS → RESOLVED → CLOSED
    """

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class IssuePriority(str, Enum):
    """Issue priority enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


ACTIVE_ISSUE_STATUSES = (IssueStatus.OPEN, IssueStatus.IN_PROGRESS)
SOLVED_ISSUE_STATUSES = (IssueStatus.RESOLVED, IssueStatus.CLOSED)
