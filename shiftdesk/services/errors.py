# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the scheduling services."""


class ShiftDeskError(Exception):
    """Base exception for service errors."""


class InvalidInputError(ShiftDeskError):
    """Request data is missing or malformed."""


class MissingFieldsError(InvalidInputError):
    """One or more required fields were not supplied."""


class InvalidDateError(InvalidInputError):
    """A date could not be parsed."""


class InvalidTimeError(InvalidInputError):
    """A time of day is not in ``HH:mm`` format."""


class NotFoundError(ShiftDeskError):
    """A referenced record does not exist."""


class EmployeeNotFoundError(NotFoundError):
    """Employee does not exist."""

    def __init__(self, message: str = "Employee not found") -> None:
        super().__init__(message)


class ShiftNotFoundError(NotFoundError):
    """Shift does not exist."""

    def __init__(self, message: str = "Shift not found") -> None:
        super().__init__(message)


class IssueNotFoundError(NotFoundError):
    """Issue does not exist."""

    def __init__(self, message: str = "Issue not found") -> None:
        super().__init__(message)


class PermissionDeniedError(ShiftDeskError):
    """The requester may not act on this record."""


class ShiftValidationError(ShiftDeskError):
    """A shift broke one or more scheduling rules.

    Carries every violation found so a client can show them all at once.
    """

    def __init__(self, violations: list, messages: list[str]) -> None:
        super().__init__("Validation failed")
        self.violations = violations
        self.messages = messages


class EmployeeCodeExistsError(ShiftDeskError):
    """Another employee already uses this code."""

    def __init__(self, message: str = "Employee code already exists") -> None:
        super().__init__(message)


class EmployeeHasShiftsError(ShiftDeskError):
    """Employee still owns shifts and cannot be deleted."""

    def __init__(
        self, message: str = "Cannot delete employee with existing shifts"
    ) -> None:
        super().__init__(message)
