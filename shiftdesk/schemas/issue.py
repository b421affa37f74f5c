# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Issue schemas."""

import datetime
import uuid
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from shiftdesk.models.enums import IssuePriority, IssueStatus
from shiftdesk.services.time_utils import TIME_PATTERN, duration_hours, normalize_time


class ShiftSnapshot(BaseModel):
    """Copy of a shift's details taken when an issue is reported."""

    date: datetime.date
    employee_name: str
    employee_code: str
    department: str
    start_time: str
    end_time: str


class CorrectedShiftData(BaseModel):
    """Corrected hours an admin records against an issue.

    Both times are required. The date is optional and defaults to the
    linked shift's date. ``duration`` is computed on the server.
    """

    date: datetime.date | None = None
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    duration: float | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def pad_time(cls, v: str) -> str:
        """Store times as zero-padded ``HH:mm``."""
        return normalize_time(v)

    @model_validator(mode="after")
    def validate_times(self) -> Self:
        """Validate that the corrected end is after the start."""
        if duration_hours(self.start_time, self.end_time) <= 0:
            raise ValueError("End time must be after start time")
        return self


class IssueCreate(BaseModel):
    """Schema for creating an issue."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    priority: IssuePriority = IssuePriority.MEDIUM
    shift_id: uuid.UUID | None = None


class IssueUpdate(BaseModel):
    """Schema for an admin updating an issue."""

    status: IssueStatus | None = None
    priority: IssuePriority | None = None
    admin_response: str | None = Field(None, max_length=1000)
    admin_notes: str | None = Field(None, max_length=1000)
    corrected_shift_data: CorrectedShiftData | None = None


class IssueResponse(BaseModel):
    """Schema for issue response."""

    id: uuid.UUID
    title: str
    description: str
    status: IssueStatus
    priority: IssuePriority
    created_by_id: uuid.UUID
    created_by_email: str | None = None
    resolved_by_id: uuid.UUID | None = None
    resolved_at: datetime.datetime | None = None
    admin_notes: str
    admin_response: str
    is_read: bool
    shift_id: uuid.UUID | None = None
    shift_data: ShiftSnapshot | None = None
    corrected_shift_data: CorrectedShiftData | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime
