# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift scheduling rules.

Checks a candidate shift against the minimum duration, the admin
past-date rule and the employee's other shifts on the same day.
"""

import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Protocol
from zoneinfo import ZoneInfo

from shiftdesk.services.time_utils import duration_hours, times_overlap

DEFAULT_MIN_SHIFT_HOURS = 4.0


class ShiftRuleViolation(str, Enum):
    """Reasons a shift can be rejected."""

    PAST_DATE = "past_date"
    END_BEFORE_START = "end_before_start"
    MIN_DURATION = "min_duration"
    OVERLAP = "overlap"


def violation_message(
    violation: ShiftRuleViolation,
    min_shift_hours: float = DEFAULT_MIN_SHIFT_HOURS,
) -> str:
    """Human-readable message for a rule violation."""
    if violation == ShiftRuleViolation.PAST_DATE:
        return "Cannot create shifts for past dates. Only future dates are allowed."
    if violation == ShiftRuleViolation.END_BEFORE_START:
        return "End time must be after start time"
    if violation == ShiftRuleViolation.MIN_DURATION:
        return f"Shift duration must be at least {min_shift_hours:g} hours"
    return "Shift overlaps with an existing shift on the same date"


class ScheduledShift(Protocol):
    """What the rules need to know about an existing shift."""

    id: uuid.UUID
    date: date
    start_time: str
    end_time: str


class ShiftSource(Protocol):
    """Lookup of existing shifts, satisfied by ShiftRepository."""

    def find_by_employee_and_date_range(
        self,
        employee_id: uuid.UUID,
        range_start: date,
        range_end: date,
    ) -> Sequence[ScheduledShift]: ...


@dataclass
class ShiftValidationResult:
    """Result of shift validation."""

    is_valid: bool
    errors: list[ShiftRuleViolation] = field(default_factory=list)
    conflicting_shift_id: uuid.UUID | None = None

    def messages(
        self, min_shift_hours: float = DEFAULT_MIN_SHIFT_HOURS
    ) -> list[str]:
        """Error messages in the order the violations were found."""
        return [violation_message(error, min_shift_hours) for error in self.errors]


def today_in(timezone: str) -> date:
    """Current calendar date in the given IANA timezone."""
    return datetime.now(ZoneInfo(timezone)).date()


class ShiftValidator:
    """Validates candidate shifts against the scheduling rules.

    Business-rule failures are returned, never raised. Errors from the
    shift source (e.g. the database being unavailable) propagate.
    """

    def __init__(
        self,
        shifts: ShiftSource,
        min_shift_hours: float = DEFAULT_MIN_SHIFT_HOURS,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the validator.

        Args:
            shifts: Source of the employee's existing shifts.
            min_shift_hours: Shortest allowed shift.
            today: Returns the current calendar date for the past-date rule.
        """
        self.shifts = shifts
        self.min_shift_hours = min_shift_hours
        self.today = today

    def validate(
        self,
        employee_id: uuid.UUID,
        shift_date: date,
        start_time: str,
        end_time: str,
        exclude_shift_id: uuid.UUID | None = None,
        is_admin: bool = False,
    ) -> ShiftValidationResult:
        """Check a candidate shift.

        Violations accumulate so a caller can report every problem at once;
        only the overlap scan stops at the first conflict.

        Args:
            employee_id: Employee the shift belongs to.
            shift_date: Calendar date of the shift.
            start_time: Start time (``HH:mm``).
            end_time: End time (``HH:mm``).
            exclude_shift_id: Shift to ignore, used when re-validating an update.
            is_admin: Apply the admin-only past-date rule.

        Returns:
            The validation result.
        """
        errors: list[ShiftRuleViolation] = []

        if is_admin and shift_date < self.today():
            errors.append(ShiftRuleViolation.PAST_DATE)

        duration = duration_hours(start_time, end_time)
        if duration <= 0:
            errors.append(ShiftRuleViolation.END_BEFORE_START)
        elif duration < self.min_shift_hours:
            errors.append(ShiftRuleViolation.MIN_DURATION)

        conflict = self._find_overlap(
            employee_id, shift_date, start_time, end_time, exclude_shift_id
        )
        if conflict is not None:
            errors.append(ShiftRuleViolation.OVERLAP)

        return ShiftValidationResult(
            is_valid=not errors,
            errors=errors,
            conflicting_shift_id=conflict.id if conflict is not None else None,
        )

    def _find_overlap(
        self,
        employee_id: uuid.UUID,
        shift_date: date,
        start_time: str,
        end_time: str,
        exclude_shift_id: uuid.UUID | None,
    ) -> ScheduledShift | None:
        """Return the first same-day shift overlapping the candidate, if any."""
        existing = self.shifts.find_by_employee_and_date_range(
            employee_id, shift_date, shift_date
        )

        for shift in existing:
            if exclude_shift_id is not None and shift.id == exclude_shift_id:
                continue
            # The range query already limits to this day; re-check anyway
            if shift.date != shift_date:
                continue
            if times_overlap(start_time, end_time, shift.start_time, shift.end_time):
                return shift

        return None
