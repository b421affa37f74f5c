# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee directory service."""

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from shiftdesk.models import Employee, User
from shiftdesk.schemas.employee import EmployeeCreate, EmployeeUpdate
from shiftdesk.services.errors import (
    EmployeeCodeExistsError,
    EmployeeHasShiftsError,
    EmployeeNotFoundError,
)
from shiftdesk.services.shift_repository import ShiftRepository

logger = logging.getLogger(__name__)


def get_employees(db: Session) -> list[Employee]:
    """Get all employees sorted by name."""
    return db.query(Employee).order_by(Employee.name).all()


def get_employee(db: Session, employee_id: uuid.UUID) -> Employee | None:
    """Get an employee by ID."""
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_employee_by_code(db: Session, employee_code: str) -> Employee | None:
    """Get an employee by code, ignoring case."""
    return (
        db.query(Employee)
        .filter(func.lower(Employee.employee_code) == employee_code.strip().lower())
        .first()
    )


def _code_taken(db: Session, employee_code: str) -> bool:
    """Check for an exact (case-sensitive) code match, as the unique index does."""
    return (
        db.query(Employee).filter(Employee.employee_code == employee_code).first()
        is not None
    )


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    """Create a new employee.

    Raises:
        EmployeeCodeExistsError: If the code is already in use.
    """
    if _code_taken(db, data.employee_code):
        raise EmployeeCodeExistsError()

    employee = Employee(
        name=data.name,
        employee_code=data.employee_code,
        department=data.department,
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)

    logger.info(f"Created employee {employee.employee_code} ({employee.id})")
    return employee


def update_employee(
    db: Session, employee_id: uuid.UUID, data: EmployeeUpdate
) -> Employee:
    """Update an employee.

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
        EmployeeCodeExistsError: If the new code is already in use.
    """
    employee = get_employee(db, employee_id)
    if not employee:
        raise EmployeeNotFoundError()

    if (
        data.employee_code is not None
        and data.employee_code != employee.employee_code
        and _code_taken(db, data.employee_code)
    ):
        raise EmployeeCodeExistsError()

    if data.name is not None:
        employee.name = data.name
    if data.employee_code is not None:
        employee.employee_code = data.employee_code
    if data.department is not None:
        employee.department = data.department

    db.commit()
    db.refresh(employee)
    return employee


def delete_employee(db: Session, employee_id: uuid.UUID) -> None:
    """Delete an employee that owns no shifts.

    Linked user accounts are kept but unlinked.

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
        EmployeeHasShiftsError: If the employee still owns shifts.
    """
    employee = get_employee(db, employee_id)
    if not employee:
        raise EmployeeNotFoundError()

    shift_count = ShiftRepository(db).count_for_employee(employee_id)
    if shift_count:
        logger.info(
            f"Refused to delete employee {employee_id}: {shift_count} shift(s) remain"
        )
        raise EmployeeHasShiftsError()

    db.query(User).filter(User.employee_id == employee_id).update(
        {User.employee_id: None}
    )
    db.delete(employee)
    db.commit()
    logger.info(f"Deleted employee {employee_id}")
