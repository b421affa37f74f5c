# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift lifecycle: create, update and delete with rule validation."""

import logging
import uuid
from datetime import date, datetime
from functools import partial

from sqlalchemy.orm import Session

from shiftdesk.config import get_settings
from shiftdesk.models import Issue, Shift, User
from shiftdesk.services import employee_service
from shiftdesk.services.errors import (
    EmployeeNotFoundError,
    InvalidDateError,
    InvalidTimeError,
    MissingFieldsError,
    PermissionDeniedError,
    ShiftNotFoundError,
    ShiftValidationError,
)
from shiftdesk.services.shift_locks import shift_slot_locks
from shiftdesk.services.shift_repository import ShiftRepository
from shiftdesk.services.shift_validation import (
    ShiftValidationResult,
    ShiftValidator,
    today_in,
)
from shiftdesk.services.time_utils import normalize_time

logger = logging.getLogger(__name__)


def parse_shift_date(value: date | str) -> date:
    """Parse a ``YYYY-MM-DD`` string (or ISO datetime) into a calendar date.

    Raises:
        InvalidDateError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDateError("Invalid date") from None


def _parse_time(value: str) -> str:
    try:
        return normalize_time(value)
    except ValueError as e:
        raise InvalidTimeError(str(e)) from None


def build_validator(db: Session) -> ShiftValidator:
    """Validator wired to the database and configured rule settings."""
    settings = get_settings()
    return ShiftValidator(
        ShiftRepository(db),
        min_shift_hours=settings.min_shift_hours,
        today=partial(today_in, settings.timezone),
    )


def _reject(db: Session, result: ShiftValidationResult) -> ShiftValidationError:
    # End the transaction so the employee row lock is released
    db.rollback()
    messages = result.messages(get_settings().min_shift_hours)
    logger.info(
        f"Shift rejected: {', '.join(error.value for error in result.errors)}"
    )
    return ShiftValidationError(result.errors, messages)


def get_shift(db: Session, shift_id: uuid.UUID) -> Shift | None:
    """Get a shift by ID."""
    return ShiftRepository(db).find_by_id(shift_id)


def get_shifts(
    db: Session,
    requester: User,
    employee_id: uuid.UUID | None = None,
    on_date: date | None = None,
) -> list[Shift]:
    """List shifts visible to the requester.

    Non-admin users only ever see their own employee's shifts.
    """
    if not requester.is_admin:
        if requester.employee_id is None:
            return []
        employee_id = requester.employee_id
    return ShiftRepository(db).find(employee_id=employee_id, on_date=on_date)


def ensure_can_manage(requester: User, employee_id: uuid.UUID) -> None:
    """Non-admin users may only manage shifts of their own employee.

    Raises:
        PermissionDeniedError: If the requester may not manage the shift.
    """
    if requester.is_admin:
        return
    if requester.employee_id is None or requester.employee_id != employee_id:
        logger.warning(
            f"User {requester.id} denied access to shifts of employee {employee_id}"
        )
        raise PermissionDeniedError(
            "Access denied. You can only manage your own shifts."
        )


def create_shift(
    db: Session,
    employee_id: uuid.UUID | None,
    shift_date: date | str | None,
    start_time: str | None,
    end_time: str | None,
    caller_is_admin: bool = False,
) -> Shift:
    """Validate and persist a new shift.

    Args:
        db: Database session.
        employee_id: Employee the shift is for.
        shift_date: Calendar date, as a date or ``YYYY-MM-DD`` string.
        start_time: Start time (``HH:mm``).
        end_time: End time (``HH:mm``).
        caller_is_admin: Apply the admin past-date rule.

    Returns:
        The created shift, with its employee available for enrichment.

    Raises:
        MissingFieldsError: If any field is missing.
        InvalidTimeError: If a time is malformed.
        EmployeeNotFoundError: If the employee does not exist.
        InvalidDateError: If the date cannot be parsed.
        ShiftValidationError: If the shift breaks a scheduling rule.
    """
    if not employee_id or not shift_date or not start_time or not end_time:
        raise MissingFieldsError("All fields are required")

    start = _parse_time(start_time)
    end = _parse_time(end_time)

    employee = employee_service.get_employee(db, employee_id)
    if not employee:
        raise EmployeeNotFoundError()

    parsed_date = parse_shift_date(shift_date)

    repo = ShiftRepository(db)
    with shift_slot_locks.hold(employee.id, parsed_date):
        repo.lock_employee(employee.id)
        result = build_validator(db).validate(
            employee.id,
            parsed_date,
            start,
            end,
            exclude_shift_id=None,
            is_admin=caller_is_admin,
        )
        if not result.is_valid:
            raise _reject(db, result)

        shift = repo.create(employee.id, parsed_date, start, end)

    logger.info(
        f"Created shift {shift.id} for employee {shift.employee_id} "
        f"on {shift.date.isoformat()} {shift.start_time}-{shift.end_time}"
    )
    return shift


def update_shift(
    db: Session,
    shift_id: uuid.UUID,
    employee_id: uuid.UUID | None = None,
    shift_date: date | str | None = None,
    start_time: str | None = None,
    end_time: str | None = None,
    caller_is_admin: bool = False,
) -> Shift:
    """Apply a partial update to a shift.

    Unspecified fields keep their current values. When anything changes, the
    merged shift is re-validated against the employee's other shifts.

    Raises:
        ShiftNotFoundError: If the shift does not exist.
        EmployeeNotFoundError: If a new employee does not exist.
        InvalidDateError: If the date cannot be parsed.
        InvalidTimeError: If a time is malformed.
        ShiftValidationError: If the merged shift breaks a scheduling rule.
    """
    repo = ShiftRepository(db)
    shift = repo.find_by_id(shift_id)
    if not shift:
        raise ShiftNotFoundError()

    new_employee_id = employee_id or shift.employee_id
    new_date = parse_shift_date(shift_date) if shift_date else shift.date
    new_start = _parse_time(start_time) if start_time else shift.start_time
    new_end = _parse_time(end_time) if end_time else shift.end_time

    if new_employee_id != shift.employee_id and not employee_service.get_employee(
        db, new_employee_id
    ):
        raise EmployeeNotFoundError()

    changed = (
        new_employee_id != shift.employee_id
        or new_date != shift.date
        or new_start != shift.start_time
        or new_end != shift.end_time
    )
    if not changed:
        return shift

    with shift_slot_locks.hold(new_employee_id, new_date):
        repo.lock_employee(new_employee_id)
        result = build_validator(db).validate(
            new_employee_id,
            new_date,
            new_start,
            new_end,
            exclude_shift_id=shift.id,
            is_admin=caller_is_admin,
        )
        if not result.is_valid:
            raise _reject(db, result)

        shift = repo.update(shift, new_employee_id, new_date, new_start, new_end)

    logger.info(
        f"Updated shift {shift.id}: {shift.date.isoformat()} "
        f"{shift.start_time}-{shift.end_time}"
    )
    return shift


def delete_shift(db: Session, shift_id: uuid.UUID, requester: User) -> None:
    """Delete a shift.

    Issues that referenced the shift keep their snapshot but lose the link.

    Raises:
        ShiftNotFoundError: If the shift does not exist.
        PermissionDeniedError: If a non-admin deletes another employee's shift.
    """
    repo = ShiftRepository(db)
    shift = repo.find_by_id(shift_id)
    if not shift:
        raise ShiftNotFoundError()

    if not requester.is_admin and (
        requester.employee_id is None or requester.employee_id != shift.employee_id
    ):
        logger.warning(f"User {requester.id} denied deleting shift {shift_id}")
        raise PermissionDeniedError(
            "Access denied. You can only delete your own shifts."
        )

    db.query(Issue).filter(Issue.shift_id == shift.id).update(
        {Issue.shift_id: None}
    )
    repo.delete(shift)
    logger.info(f"Deleted shift {shift_id}")
