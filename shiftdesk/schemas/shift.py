# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from shiftdesk.schemas.employee import EmployeeSummary
from shiftdesk.services.time_utils import TIME_PATTERN


class ShiftCreate(BaseModel):
    """Schema for creating a shift.

    Fields are optional here so that missing values and unparseable dates
    are reported by the service with its own messages.
    """

    employee_id: uuid.UUID | None = None
    date: str | None = Field(None, description="Calendar date, YYYY-MM-DD")
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    end_time: str | None = Field(None, pattern=TIME_PATTERN)


class ShiftUpdate(BaseModel):
    """Schema for updating a shift. Omitted fields keep their values."""

    employee_id: uuid.UUID | None = None
    date: str | None = None
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    end_time: str | None = Field(None, pattern=TIME_PATTERN)


class ShiftResponse(BaseModel):
    """Schema for shift response, enriched with employee display fields."""

    id: uuid.UUID
    employee_id: uuid.UUID
    date: datetime.date
    start_time: str
    end_time: str
    duration_hours: float
    employee: EmployeeSummary | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class ShiftValidationErrorResponse(BaseModel):
    """Body returned when a shift breaks scheduling rules."""

    message: str = "Validation failed"
    errors: list[str]
    codes: list[str]
