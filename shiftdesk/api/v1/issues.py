# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Issue API endpoints."""

import math
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from shiftdesk.api.deps import get_current_admin, get_current_user, get_db, http_error
from shiftdesk.models import Issue, IssuePriority, IssueStatus, User
from shiftdesk.schemas.common import (
    CountResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from shiftdesk.schemas.issue import IssueCreate, IssueResponse, IssueUpdate
from shiftdesk.services import issue_service
from shiftdesk.services.errors import ShiftDeskError

router = APIRouter()


def build_issue_response(issue: Issue) -> IssueResponse:
    """Build IssueResponse including the reporter's email."""
    return IssueResponse(
        id=issue.id,
        title=issue.title,
        description=issue.description,
        status=issue.status,
        priority=issue.priority,
        created_by_id=issue.created_by_id,
        created_by_email=issue.created_by.email if issue.created_by else None,
        resolved_by_id=issue.resolved_by_id,
        resolved_at=issue.resolved_at,
        admin_notes=issue.admin_notes,
        admin_response=issue.admin_response,
        is_read=issue.is_read,
        shift_id=issue.shift_id,
        shift_data=issue.shift_data,
        corrected_shift_data=issue.corrected_shift_data,
        created_at=issue.created_at,
        updated_at=issue.updated_at,
    )


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
def create_issue(
    data: IssueCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> IssueResponse:
    """Report an issue, optionally about one of the user's shifts."""
    try:
        issue = issue_service.create_issue(db, data, current_user)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_issue_response(issue)


@router.get("", response_model=PaginatedResponse[IssueResponse])
def list_issues(
    status_filter: IssueStatus | None = Query(None, alias="status"),
    priority: IssuePriority | None = None,
    search: str | None = None,
    show_solved: bool = False,
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaginatedResponse[IssueResponse]:
    """List issues, newest first. Non-admin users only see their own."""
    issues, total = issue_service.get_issues(
        db,
        current_user,
        status=status_filter,
        priority=priority,
        search=search,
        show_solved=show_solved,
        page=page,
        per_page=per_page,
    )
    size = issue_service.resolve_page_size(per_page)
    pages = math.ceil(total / size) if total else 0
    return PaginatedResponse[IssueResponse](
        data=[build_issue_response(i) for i in issues],
        meta=PaginationMeta(
            total=total,
            page=page,
            per_page=size,
            pages=pages,
            has_next=page * size < total,
            has_prev=page > 1,
        ),
    )


# NOTE: /unread-count must come BEFORE /{issue_id} so it is not parsed as a UUID
@router.get("/unread-count", response_model=CountResponse)
def get_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> CountResponse:
    """Count unread active issues. Admin only."""
    return CountResponse(count=issue_service.get_unread_count(db))


@router.get("/{issue_id}", response_model=IssueResponse)
def get_issue(
    issue_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> IssueResponse:
    """Get an issue by ID."""
    try:
        issue = issue_service.get_issue(db, issue_id, current_user)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_issue_response(issue)


@router.put("/{issue_id}", response_model=IssueResponse)
def update_issue(
    issue_id: uuid.UUID,
    data: IssueUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> IssueResponse:
    """Respond to an issue and optionally correct its shift. Admin only."""
    try:
        issue = issue_service.update_issue(db, issue_id, data, current_user)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_issue_response(issue)


@router.patch("/{issue_id}/read", response_model=IssueResponse)
def mark_issue_read(
    issue_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> IssueResponse:
    """Mark an issue as read. Admin only."""
    try:
        issue = issue_service.mark_as_read(db, issue_id)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_issue_response(issue)


@router.delete("/{issue_id}", response_model=MessageResponse)
def delete_issue(
    issue_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> MessageResponse:
    """Delete an issue. Admin only."""
    try:
        issue_service.delete_issue(db, issue_id)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return MessageResponse(message="Issue deleted successfully")
