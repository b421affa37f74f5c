# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shiftdesk.api.deps import get_current_admin, get_current_user, get_db, http_error
from shiftdesk.models import User
from shiftdesk.schemas.common import MessageResponse
from shiftdesk.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from shiftdesk.services import employee_service
from shiftdesk.services.errors import ShiftDeskError

router = APIRouter()


@router.get("", response_model=list[EmployeeResponse])
def list_employees(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[EmployeeResponse]:
    """List all employees sorted by name."""
    employees = employee_service.get_employees(db)
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    data: EmployeeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> EmployeeResponse:
    """Create an employee. Admin only."""
    try:
        employee = employee_service.create_employee(db, data)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> EmployeeResponse:
    """Get an employee by ID."""
    employee = employee_service.get_employee(db, employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return EmployeeResponse.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: uuid.UUID,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> EmployeeResponse:
    """Update an employee. Admin only."""
    try:
        employee = employee_service.update_employee(db, employee_id, data)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return EmployeeResponse.model_validate(employee)


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(
    employee_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> MessageResponse:
    """Delete an employee that has no shifts. Admin only."""
    try:
        employee_service.delete_employee(db, employee_id)
    except ShiftDeskError as e:
        raise http_error(e) from None
    return MessageResponse(message="Employee deleted successfully")
