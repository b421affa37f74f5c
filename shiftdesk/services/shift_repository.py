# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persistence for shift records."""

import uuid
from datetime import date

from sqlalchemy.orm import Session, joinedload

from shiftdesk.models import Employee, Shift


class ShiftRepository:
    """Queries and writes for the shifts table."""

    def __init__(self, db: Session) -> None:
        """Initialize the repository.

        Args:
            db: Database session.
        """
        self.db = db

    def find_by_id(self, shift_id: uuid.UUID) -> Shift | None:
        """Get a shift by ID, with its employee loaded."""
        return (
            self.db.query(Shift)
            .options(joinedload(Shift.employee))
            .filter(Shift.id == shift_id)
            .first()
        )

    def find_by_employee_and_date_range(
        self,
        employee_id: uuid.UUID,
        range_start: date,
        range_end: date,
    ) -> list[Shift]:
        """Get an employee's shifts dated within an inclusive range."""
        return (
            self.db.query(Shift)
            .filter(
                Shift.employee_id == employee_id,
                Shift.date >= range_start,
                Shift.date <= range_end,
            )
            .order_by(Shift.date, Shift.start_time)
            .all()
        )

    def find(
        self,
        employee_id: uuid.UUID | None = None,
        on_date: date | None = None,
    ) -> list[Shift]:
        """List shifts, newest date first and earliest start first within a day."""
        query = self.db.query(Shift).options(joinedload(Shift.employee))
        if employee_id:
            query = query.filter(Shift.employee_id == employee_id)
        if on_date:
            query = query.filter(Shift.date == on_date)
        return query.order_by(Shift.date.desc(), Shift.start_time).all()

    def count_for_employee(self, employee_id: uuid.UUID) -> int:
        """Number of shifts owned by an employee."""
        return self.db.query(Shift).filter(Shift.employee_id == employee_id).count()

    def lock_employee(self, employee_id: uuid.UUID) -> Employee | None:
        """Row-lock an employee until the current transaction ends.

        Emits ``SELECT ... FOR UPDATE`` where the backend supports it, so
        writers in other processes serialise on the same employee.
        """
        return (
            self.db.query(Employee)
            .filter(Employee.id == employee_id)
            .with_for_update()
            .first()
        )

    def create(
        self,
        employee_id: uuid.UUID,
        shift_date: date,
        start_time: str,
        end_time: str,
    ) -> Shift:
        """Insert a shift and commit."""
        shift = Shift(
            employee_id=employee_id,
            date=shift_date,
            start_time=start_time,
            end_time=end_time,
        )
        self.db.add(shift)
        self.db.commit()
        self.db.refresh(shift)
        return shift

    def update(
        self,
        shift: Shift,
        employee_id: uuid.UUID,
        shift_date: date,
        start_time: str,
        end_time: str,
    ) -> Shift:
        """Overwrite a shift's fields and commit."""
        shift.employee_id = employee_id
        shift.date = shift_date
        shift.start_time = start_time
        shift.end_time = end_time
        self.db.commit()
        self.db.refresh(shift)
        return shift

    def delete(self, shift: Shift) -> None:
        """Delete a shift and commit."""
        self.db.delete(shift)
        self.db.commit()
