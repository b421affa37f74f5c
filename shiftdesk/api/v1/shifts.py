# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift API endpoints."""

import datetime
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from shiftdesk.api.deps import get_current_admin, get_current_user, get_db, http_error
from shiftdesk.models import Shift, User
from shiftdesk.schemas.common import MessageResponse
from shiftdesk.schemas.employee import EmployeeSummary
from shiftdesk.schemas.shift import ShiftCreate, ShiftResponse, ShiftUpdate
from shiftdesk.services import shift_service
from shiftdesk.services.errors import ShiftDeskError
from shiftdesk.services.time_utils import duration_hours

router = APIRouter()


def build_shift_response(shift: Shift) -> ShiftResponse:
    """Build ShiftResponse with the employee's display fields joined on."""
    return ShiftResponse(
        id=shift.id,
        employee_id=shift.employee_id,
        date=shift.date,
        start_time=shift.start_time,
        end_time=shift.end_time,
        duration_hours=duration_hours(shift.start_time, shift.end_time),
        employee=(
            EmployeeSummary.model_validate(shift.employee) if shift.employee else None
        ),
        created_at=shift.created_at,
        updated_at=shift.updated_at,
    )


@router.get("", response_model=list[ShiftResponse])
def list_shifts(
    employee: uuid.UUID | None = Query(None, description="Filter by employee"),
    date: datetime.date | None = Query(None, description="Filter by date"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ShiftResponse]:
    """List shifts. Non-admin users only see their own."""
    shifts = shift_service.get_shifts(
        db, current_user, employee_id=employee, on_date=date
    )
    return [build_shift_response(s) for s in shifts]


@router.post("", response_model=ShiftResponse, status_code=status.HTTP_201_CREATED)
def create_shift(
    data: ShiftCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> ShiftResponse:
    """Schedule a shift. Admin only; past dates are refused.

    Employees ask for changes to their hours by reporting an issue.
    """
    try:
        shift = shift_service.create_shift(
            db,
            data.employee_id,
            data.date,
            data.start_time,
            data.end_time,
            caller_is_admin=True,
        )
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_shift_response(shift)


@router.get("/{shift_id}", response_model=ShiftResponse)
def get_shift(
    shift_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ShiftResponse:
    """Get a shift by ID."""
    shift = shift_service.get_shift(db, shift_id)
    if not shift:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shift not found",
        )
    try:
        shift_service.ensure_can_manage(current_user, shift.employee_id)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_shift_response(shift)


@router.put("/{shift_id}", response_model=ShiftResponse)
def update_shift(
    shift_id: uuid.UUID,
    data: ShiftUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> ShiftResponse:
    """Update a shift. Admin only; omitted fields keep their current values."""
    try:
        shift = shift_service.update_shift(
            db,
            shift_id,
            employee_id=data.employee_id,
            shift_date=data.date,
            start_time=data.start_time,
            end_time=data.end_time,
            caller_is_admin=True,
        )
    except ShiftDeskError as e:
        raise http_error(e) from None
    return build_shift_response(shift)


@router.delete("/{shift_id}", response_model=MessageResponse)
def delete_shift(
    shift_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Delete a shift. Non-admin users may only delete their own."""
    try:
        shift_service.delete_shift(db, shift_id, current_user)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return MessageResponse(message="Shift deleted successfully")
