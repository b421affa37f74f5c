# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Issue reporting service."""

import logging
import uuid
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from shiftdesk.config import get_settings
from shiftdesk.models import (
    ACTIVE_ISSUE_STATUSES,
    SOLVED_ISSUE_STATUSES,
    Issue,
    IssuePriority,
    IssueStatus,
    Shift,
    User,
)
from shiftdesk.models.base import utcnow
from shiftdesk.schemas.issue import IssueCreate, IssueUpdate
from shiftdesk.services import shift_service
from shiftdesk.services.errors import (
    IssueNotFoundError,
    PermissionDeniedError,
    ShiftNotFoundError,
)
from shiftdesk.services.time_utils import duration_hours

logger = logging.getLogger(__name__)


def snapshot_shift(shift: Shift) -> dict[str, Any]:
    """Copy the shift details an issue should keep if the shift changes."""
    return {
        "date": shift.date.isoformat(),
        "employee_name": shift.employee.name,
        "employee_code": shift.employee.employee_code,
        "department": shift.employee.department,
        "start_time": shift.start_time,
        "end_time": shift.end_time,
    }


def create_issue(db: Session, data: IssueCreate, user: User) -> Issue:
    """Create an issue, snapshotting the referenced shift if any.

    Raises:
        ShiftNotFoundError: If the referenced shift does not exist.
        PermissionDeniedError: If a non-admin reports on someone else's shift.
    """
    shift_data = None
    if data.shift_id:
        shift = shift_service.get_shift(db, data.shift_id)
        if not shift:
            raise ShiftNotFoundError()
        shift_service.ensure_can_manage(user, shift.employee_id)
        shift_data = snapshot_shift(shift)

    issue = Issue(
        title=data.title.strip(),
        description=data.description.strip(),
        priority=data.priority,
        status=IssueStatus.OPEN,
        created_by_id=user.id,
        shift_id=data.shift_id,
        shift_data=shift_data,
    )
    db.add(issue)
    db.commit()
    db.refresh(issue)

    logger.info(f"Issue {issue.id} reported by user {user.id}")
    return issue


def resolve_page_size(per_page: int | None) -> int:
    """Requested page size, defaulted and capped by configuration."""
    settings = get_settings()
    return min(per_page or settings.issue_page_size, settings.issue_max_page_size)


def get_issues(
    db: Session,
    requester: User,
    status: IssueStatus | None = None,
    priority: IssuePriority | None = None,
    search: str | None = None,
    show_solved: bool = False,
    page: int = 1,
    per_page: int | None = None,
) -> tuple[list[Issue], int]:
    """Get a page of issues with optional filters.

    Non-admin users only see issues they created. Without an explicit status
    filter, solved issues are hidden unless ``show_solved`` is set.

    Returns:
        The issues on the requested page and the total match count.
    """
    per_page = resolve_page_size(per_page)
    page = max(page, 1)

    query = db.query(Issue)
    if not requester.is_admin:
        query = query.filter(Issue.created_by_id == requester.id)

    if status:
        query = query.filter(Issue.status == status)
    elif not show_solved:
        query = query.filter(Issue.status.in_(ACTIVE_ISSUE_STATUSES))

    if priority:
        query = query.filter(Issue.priority == priority)

    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(
            or_(Issue.title.ilike(pattern), Issue.description.ilike(pattern))
        )

    total = query.count()
    issues = (
        query.options(joinedload(Issue.created_by))
        .order_by(Issue.created_at.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return issues, total


def get_issue(db: Session, issue_id: uuid.UUID, requester: User) -> Issue:
    """Get an issue the requester is allowed to see.

    Raises:
        IssueNotFoundError: If the issue does not exist.
        PermissionDeniedError: If a non-admin asks for another user's issue.
    """
    issue = db.query(Issue).filter(Issue.id == issue_id).first()
    if not issue:
        raise IssueNotFoundError()
    if not requester.is_admin and issue.created_by_id != requester.id:
        raise PermissionDeniedError("Access denied")
    return issue


def update_issue(
    db: Session, issue_id: uuid.UUID, data: IssueUpdate, admin: User
) -> Issue:
    """Update an issue as an admin.

    Corrected shift times are applied to the linked shift through the
    normal shift update, so they are validated like any other edit. If the
    correction is rejected nothing on the issue changes.

    Raises:
        IssueNotFoundError: If the issue does not exist.
        ShiftValidationError: If the corrected shift breaks a scheduling rule.
    """
    issue = db.query(Issue).filter(Issue.id == issue_id).first()
    if not issue:
        raise IssueNotFoundError()

    corrected = data.corrected_shift_data
    if corrected is not None:
        if issue.shift_id:
            # Corrections describe hours already worked, so past dates are allowed
            shift_service.update_shift(
                db,
                issue.shift_id,
                shift_date=corrected.date,
                start_time=corrected.start_time,
                end_time=corrected.end_time,
                caller_is_admin=False,
            )
        corrected = corrected.model_copy(
            update={
                "duration": duration_hours(corrected.start_time, corrected.end_time)
            }
        )
        issue.corrected_shift_data = corrected.model_dump(mode="json")

    if data.admin_response is not None:
        issue.admin_response = data.admin_response.strip()
    if data.admin_notes is not None:
        issue.admin_notes = data.admin_notes.strip()
    if data.priority is not None:
        issue.priority = data.priority
    if data.status is not None and data.status != issue.status:
        issue.status = data.status
        if data.status in SOLVED_ISSUE_STATUSES:
            if issue.resolved_at is None:
                issue.resolved_at = utcnow()
                issue.resolved_by_id = admin.id
        else:
            issue.resolved_at = None
            issue.resolved_by_id = None

    db.commit()
    db.refresh(issue)
    return issue


def mark_as_read(db: Session, issue_id: uuid.UUID) -> Issue:
    """Mark an issue as read by an admin.

    Raises:
        IssueNotFoundError: If the issue does not exist.
    """
    issue = db.query(Issue).filter(Issue.id == issue_id).first()
    if not issue:
        raise IssueNotFoundError()
    issue.is_read = True
    db.commit()
    db.refresh(issue)
    return issue


def get_unread_count(db: Session) -> int:
    """Count unread issues that are still open or in progress."""
    return (
        db.query(Issue)
        .filter(
            Issue.status.in_(ACTIVE_ISSUE_STATUSES),
            Issue.is_read.is_(False),
        )
        .count()
    )


def delete_issue(db: Session, issue_id: uuid.UUID) -> None:
    """Delete an issue.

    Raises:
        IssueNotFoundError: If the issue does not exist.
    """
    issue = db.query(Issue).filter(Issue.id == issue_id).first()
    if not issue:
        raise IssueNotFoundError()
    db.delete(issue)
    db.commit()
    logger.info(f"Deleted issue {issue_id}")
